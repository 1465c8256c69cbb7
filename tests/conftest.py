"""Shared test fixtures."""

from __future__ import annotations

import pytest

from slideshape.color.palette import ThemePalette
from slideshape.engine.geometry import GeometryResolver


A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
P_NS = "http://schemas.openxmlformats.org/presentationml/2006/main"

THEME_COLORS = {
    "dk1": "000000",
    "lt1": "FFFFFF",
    "dk2": "44546A",
    "lt2": "E7E6E6",
    "accent1": "4472C4",
    "accent2": "ED7D31",
    "accent3": "A5A5A5",
    "accent4": "FFC000",
    "accent5": "5B9BD5",
    "accent6": "70AD47",
    "hlink": "0563C1",
    "folHlink": "954F72",
}

THEME_XML = f'''<a:theme xmlns:a="{A_NS}" name="Office Theme">
  <a:themeElements>
    <a:clrScheme name="Office">
      <a:dk1><a:sysClr val="windowText" lastClr="000000"/></a:dk1>
      <a:lt1><a:sysClr val="window" lastClr="FFFFFF"/></a:lt1>
      <a:dk2><a:srgbClr val="44546A"/></a:dk2>
      <a:lt2><a:srgbClr val="E7E6E6"/></a:lt2>
      <a:accent1><a:srgbClr val="4472C4"/></a:accent1>
      <a:accent2><a:srgbClr val="ED7D31"/></a:accent2>
      <a:accent3><a:srgbClr val="A5A5A5"/></a:accent3>
      <a:accent4><a:srgbClr val="FFC000"/></a:accent4>
      <a:accent5><a:srgbClr val="5B9BD5"/></a:accent5>
      <a:accent6><a:srgbClr val="70AD47"/></a:accent6>
      <a:hlink><a:srgbClr val="0563C1"/></a:hlink>
      <a:folHlink><a:srgbClr val="954F72"/></a:folHlink>
    </a:clrScheme>
    <a:fmtScheme name="Office">
      <a:lnStyleLst>
        <a:ln w="6350"><a:solidFill><a:schemeClr val="phClr"/></a:solidFill><a:prstDash val="solid"/></a:ln>
        <a:ln w="12700"><a:solidFill><a:schemeClr val="phClr"/></a:solidFill><a:prstDash val="sysDot"/></a:ln>
        <a:ln w="19050"><a:solidFill><a:schemeClr val="phClr"/></a:solidFill></a:ln>
      </a:lnStyleLst>
    </a:fmtScheme>
  </a:themeElements>
</a:theme>'''

# 100 x 50 pt rounded rectangle, accent fill, dashed red outline, shadow at 45°
ROUND_RECT_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:nvSpPr><p:cNvPr id="4" name="Rounded Rectangle 3"/></p:nvSpPr>
  <p:spPr>
    <a:xfrm><a:off x="0" y="0"/><a:ext cx="1270000" cy="635000"/></a:xfrm>
    <a:prstGeom prst="roundRect"><a:avLst><a:gd name="adj" fmla="val 20000"/></a:avLst></a:prstGeom>
    <a:solidFill><a:schemeClr val="accent1"><a:lumMod val="75000"/></a:schemeClr></a:solidFill>
    <a:ln w="25400">
      <a:solidFill><a:srgbClr val="FF0000"/></a:solidFill>
      <a:prstDash val="dash"/>
    </a:ln>
    <a:effectLst>
      <a:outerShdw blurRad="50800" dist="38100" dir="2700000">
        <a:srgbClr val="000000"><a:alpha val="40000"/></a:srgbClr>
      </a:outerShdw>
    </a:effectLst>
  </p:spPr>
</p:sp>'''

# Custom geometry: a 100 x 100 design square drawn as four lines
CUSTOM_RECT_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:spPr>
    <a:xfrm><a:ext cx="2540000" cy="2540000"/></a:xfrm>
    <a:custGeom>
      <a:pathLst>
        <a:path w="100" h="100">
          <a:moveTo><a:pt x="0" y="0"/></a:moveTo>
          <a:lnTo><a:pt x="100" y="0"/></a:lnTo>
          <a:lnTo><a:pt x="100" y="100"/></a:lnTo>
          <a:lnTo><a:pt x="0" y="100"/></a:lnTo>
          <a:close/>
        </a:path>
      </a:pathLst>
    </a:custGeom>
    <a:noFill/>
  </p:spPr>
</p:sp>'''

# Custom geometry with a zero-width design space
DEGENERATE_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:spPr>
    <a:custGeom>
      <a:pathLst>
        <a:path w="0" h="100">
          <a:moveTo><a:pt x="0" y="0"/></a:moveTo>
          <a:lnTo><a:pt x="0" y="100"/></a:lnTo>
        </a:path>
      </a:pathLst>
    </a:custGeom>
  </p:spPr>
</p:sp>'''

# Shape whose fill comes from the style block
STYLED_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:spPr>
    <a:prstGeom prst="ellipse"><a:avLst/></a:prstGeom>
    <a:solidFill><a:srgbClr val="00FF00"/></a:solidFill>
  </p:spPr>
  <p:style>
    <a:fillRef idx="1"><a:schemeClr val="accent2"/></a:fillRef>
  </p:style>
</p:sp>'''

# Outline only from the style: theme line style 2, accent1 at half shade
LINE_STYLED_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:spPr>
    <a:prstGeom prst="rect"><a:avLst/></a:prstGeom>
  </p:spPr>
  <p:style>
    <a:lnRef idx="2"><a:schemeClr val="accent1"><a:shade val="50000"/></a:schemeClr></a:lnRef>
    <a:fillRef idx="1"><a:schemeClr val="accent1"/></a:fillRef>
  </p:style>
</p:sp>'''

# Linear gradient with stops out of order
GRADIENT_SP_XML = f'''<p:sp xmlns:p="{P_NS}" xmlns:a="{A_NS}">
  <p:spPr>
    <a:prstGeom prst="rect"><a:avLst/></a:prstGeom>
    <a:gradFill rotWithShape="1">
      <a:gsLst>
        <a:gs pos="100000"><a:schemeClr val="accent1"><a:lumMod val="50000"/></a:schemeClr></a:gs>
        <a:gs pos="0"><a:srgbClr val="FF0000"/></a:gs>
        <a:gs pos="50000"><a:sysClr val="window" lastClr="FFFFFF"/></a:gs>
      </a:gsLst>
      <a:lin ang="5400000" scaled="0"/>
    </a:gradFill>
  </p:spPr>
</p:sp>'''


@pytest.fixture
def palette() -> ThemePalette:
    return ThemePalette.from_mapping(THEME_COLORS)


@pytest.fixture
def resolver() -> GeometryResolver:
    return GeometryResolver()
