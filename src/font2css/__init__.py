"""font2css - Convert font files to CSS @font-face stylesheets.

font2css takes font files (TTF, OTF, WOFF, WOFF2, EOT, SVG) and emits one CSS
file per font containing a single @font-face rule. The font is either embedded
as a base64 data URI or referenced under an external destination URL. The
font-family, font-style and font-weight declarations are guessed from the
hyphen-delimited file name.

Example:
    $ font2css OpenSans-Bold-Italic.ttf

This will create OpenSans-Bold-Italic.css containing:
    @font-face{font-style:italic;font-weight:700;font-family:"OpenSans";src:url(data:...);}
"""

__version__ = "0.1.0"
__author__ = "font2css contributors"

__all__ = ["__author__", "__version__"]
