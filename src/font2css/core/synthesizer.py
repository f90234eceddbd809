"""@font-face rule synthesis for a single font file.

Key components:
- FontFaceSynthesizer: Turns one buffered font file into one CSS file
"""

import structlog

from font2css.config import SynthesizerConfig
from font2css.core.naming import get_font_family, guess_attributes
from font2css.core.source import get_src
from font2css.domain import ContentsMode, FontFaceRule, FontFile
from font2css.exceptions import StreamingNotSupportedError

CSS_EXTENSION = ".css"


class FontFaceSynthesizer:
    """Converts font files into CSS files holding a single @font-face rule.

    Null files are returned unchanged, streamed files are rejected and
    buffered files are rewritten in place: their contents become the CSS
    rule and their extension becomes ``.css``.

    Example:
        synthesizer = FontFaceSynthesizer(SynthesizerConfig(dest="fonts/"))
        css_file = synthesizer.synthesize(FontFile(Path("Arial-Bold.ttf"), data))
        print(css_file.contents.decode())
    """

    def __init__(self, config: SynthesizerConfig | None = None) -> None:
        """Initialize the synthesizer.

        Args:
            config: Synthesis settings (defaults to embedding data URIs)
        """
        self.config = config or SynthesizerConfig()
        self.logger = structlog.get_logger(__name__)

    def build_rule(self, file: FontFile) -> FontFaceRule:
        """Build the @font-face rule for a buffered file without mutating it.

        Args:
            file: Buffer-mode font file

        Returns:
            Rule with declarations in order: style, weight, family, src

        Raises:
            MalformedPathError: If an external reference cannot be built
        """
        basename = file.stem
        guess = guess_attributes(basename)

        declarations = guess.declarations()
        declarations.append(get_font_family(basename, guess.matched_count))
        declarations.append(get_src(file.path, file.contents, self.config.dest))

        return FontFaceRule(declarations=tuple(declarations))

    def synthesize(self, file: FontFile) -> FontFile:
        """Process one file according to its contents representation.

        Args:
            file: File to process

        Returns:
            The same file object, converted in place when buffered

        Raises:
            StreamingNotSupportedError: If the contents are a stream
            MalformedPathError: If an external reference cannot be built
        """
        mode = file.mode

        if mode is ContentsMode.NULL:
            return file

        if mode is ContentsMode.STREAM:
            raise StreamingNotSupportedError(file.path)

        if mode is ContentsMode.BUFFER:
            rule = self.build_rule(file)
            file.contents = rule.to_bytes()
            file.replace_ext(CSS_EXTENSION)
            self.logger.debug(
                "Synthesized @font-face rule",
                path=str(file.path),
                declarations=len(rule.declarations),
            )
            return file

        raise AssertionError(f"Unhandled contents mode: {mode}")
