""" Parsed command line and its display form. """
from platform_profile import PlatformProfile, default_profile

ESCAPED_CHARS = (" ", "\t")


class ParsedCommand:
    def __init__(self, program="", args=None, requires_shell=False, raw_text="",
                 empty_program=False):
        self.program = program
        # program is a real token even though it is "" (e.g. from '')
        self.empty_program = empty_program
        self.args = list(args) if args else []
        self.requires_shell = requires_shell  # True when the text must go to a shell
        self.raw_text = raw_text              # text as given to parse()

    @classmethod
    def from_parsed(cls, program: str, args: list[str] | None = None) -> "ParsedCommand":
        """ Build a command from tokens that were split elsewhere. """
        args = list(args) if args else []
        return cls(program, args, requires_shell=False, raw_text=to_display(program, args))

    @property
    def tokens(self) -> list[str]:
        if not self.program and not self.args and not self.empty_program:
            return []
        return [self.program] + self.args

    def clear(self):
        self.program = ""
        self.empty_program = False
        self.args = []
        self.requires_shell = False
        self.raw_text = ""

    def copy_from(self, other: "ParsedCommand", raw_text=None, program=None, args=None):
        """ Take over another command's fields, replacing any that are given. """
        self.raw_text = other.raw_text if raw_text is None else raw_text
        self.program = other.program if program is None else program
        self.args = list(other.args if args is None else args)
        self.requires_shell = other.requires_shell
        self.empty_program = other.empty_program if program is None else False
        return self

    def to_display(self, profile: PlatformProfile | None = None) -> str:
        return to_display(self.program, self.args, profile)

    def __eq__(self, other):
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return (self.tokens, self.requires_shell, self.raw_text) == \
            (other.tokens, other.requires_shell, other.raw_text)

    def __repr__(self):
        return (f"ParsedCommand(program={self.program!r}, args={self.args!r}, "
                f"requires_shell={self.requires_shell!r})")

    def __str__(self):
        return self.to_display()


def escape(text: str, profile: PlatformProfile | None = None) -> str:
    """ Escape blanks so the text splits back into one token. """
    if profile is None:
        profile = default_profile()
    esc = profile.escape_char

    # literal escape chars first, or the ones added below would get doubled
    result = text.replace(esc, esc + esc)
    for char in ESCAPED_CHARS:
        result = result.replace(char, esc + char)
    return result


def to_display(program: str, args: list[str] | None = None,
               profile: PlatformProfile | None = None) -> str:
    """ Join program and args into a single line, escaping each part. """
    parts = [program] if program else []
    if args:
        parts.extend(args)
    return " ".join(escape(part, profile) for part in parts)
