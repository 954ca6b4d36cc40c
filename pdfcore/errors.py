"""Exception hierarchy for PDF processing errors."""


class PdfError(Exception):
    """Base class for every error raised while handling a PDF document."""

    template = "{}"

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(self.template.format(message))


class WrongPasswordError(PdfError):
    """The supplied password does not open the document."""

    template = "Password is wrong"


class ReaderError(PdfError):
    template = "Reader Error: '{}'"


class FileError(PdfError):
    template = "File Error:'{}'"


class ParseObjectError(PdfError):
    template = "Parse object error: '{}'"


class FilterError(PdfError):
    template = "Filter error:{}"


class ObjectError(PdfError):
    template = "Object error:{}"


class XrefError(PdfError):
    template = "Object error:{}"


class DocumentStructureError(PdfError):
    template = "Document Structure error:{}"


class PageError(PdfError):
    template = "PDF Page Error {}"


class InterpreterError(PdfError):
    template = "Page Content Interpreter error:{}"


class ContentParserError(PdfError):
    template = "Content parser error:{}"


class PathError(PdfError):
    template = "Path error:{}"


class FontError(PdfError):
    template = "Font error:{}"


class CharacterError(PdfError):
    template = "Character:{}"


class ColorError(PdfError):
    template = "Color:{}"


class FunctionError(PdfError):
    template = "Function:{}"


class ImageError(PdfError):
    template = "Image:{}"


class PatternError(PdfError):
    template = "Pattern:{}"