"""Document body templates, one per reconciled entity kind."""

from __future__ import annotations

from string import Template
from typing import Final

CULTURE_TEMPLATE: Final = Template(
    """
<h1>$name</h1>
<p class="fmg-swatch" style="color: $color">&#9632;</p>
<dl>
  <dt>Type</dt><dd>$type</dd>
  <dt>Code</dt><dd>$code</dd>
</dl>
"""
)

COUNTRY_TEMPLATE: Final = Template(
    """
<h1>$full_name</h1>
<p class="fmg-swatch" style="color: $color">&#9632;</p>
<dl>
  <dt>Form</dt><dd>$form</dd>
  <dt>Culture</dt><dd>$culture</dd>
  <dt>Urban population</dt><dd>$urban</dd>
  <dt>Rural population</dt><dd>$rural</dd>
</dl>
<h2>Provinces</h2>
<ul>
$provinces
</ul>
<h2>Diplomacy</h2>
<ul>
$diplomacy
</ul>
"""
)

PROVINCE_TEMPLATE: Final = Template(
    """
<h1>$full_name</h1>
<p class="fmg-swatch" style="color: $color">&#9632;</p>
<dl>
  <dt>Form</dt><dd>$form</dd>
  <dt>Country</dt><dd>$country</dd>
  <dt>Center</dt><dd>$center</dd>
</dl>
<h2>Burgs</h2>
<ul>
$members
</ul>
"""
)

BURG_TEMPLATE: Final = Template(
    """
<h1>$name</h1>
<dl>
  <dt>Country</dt><dd>$country</dd>
  <dt>Province</dt><dd>$province</dd>
  <dt>Culture</dt><dd>$culture</dd>
  <dt>Population</dt><dd>$population</dd>
  <dt>Position</dt><dd>$x, $y</dd>
  <dt>Features</dt><dd>$features</dd>
</dl>
<p>$city_map</p>
"""
)

DEFAULT_TEMPLATES: Final[dict[str, Template]] = {
    "culture": CULTURE_TEMPLATE,
    "country": COUNTRY_TEMPLATE,
    "province": PROVINCE_TEMPLATE,
    "burg": BURG_TEMPLATE,
}
