""" Lexical analysis for shell commands. """
from dataclasses import dataclass, field

from command import ParsedCommand
from constants import (CALL_PREFIX_CHARS, NEWLINE, OPERATOR_CHARS, PARENS, QUOTE_KINDS,
                       QUOTE_LEVELS, WHITESPACE_CHARS)
from exceptions import UnmatchedQuoteError
from platform_profile import PlatformProfile, default_profile


@dataclass
class ScanState:
    """ Everything the scanner remembers between two characters. """
    buffer: list[str] = field(default_factory=list)
    tokens: list[str] = field(default_factory=list)
    has_token: bool = False
    is_escaped: bool = False
    quote_level: int = 0        # 1 = single-quoted, 2 = double-quoted
    is_inner_quoted: bool = False
    quote_start: int = -1
    in_comment: bool = False
    operator_char: str | None = None
    requires_shell: bool = False
    prev_char: str | None = None
    pos: int = 0

    def append(self, char: str):
        self.buffer.append(char)
        self.has_token = True

    def flush(self):
        self.tokens.append("".join(self.buffer))
        self.buffer.clear()
        self.has_token = False


@dataclass
class StepOutcome:
    consumed: bool = False        # char went into the current token
    flush_token: bool = False     # at least one token was completed
    set_shell_flag: bool = False


def step(state: ScanState, char: str, profile: PlatformProfile,
         peek: str | None = None) -> StepOutcome:
    """ Feed one character to the scanner. peek is the character after it, if any. """
    outcome = StepOutcome()
    try:
        _dispatch(state, char, profile, peek, outcome)
    finally:
        state.prev_char = char
        state.pos += 1
    if outcome.set_shell_flag:
        state.requires_shell = True
    return outcome


def _append(state, char, outcome):
    state.append(char)
    outcome.consumed = True


def _flush(state, outcome):
    state.flush()
    outcome.flush_token = True


def _dispatch(state, char, profile, peek, outcome):
    if state.in_comment:
        if char != NEWLINE:
            return
        # the newline is not part of the comment
        state.in_comment = False

    if state.operator_char is not None:
        _append(state, char, outcome)
        if peek != state.operator_char:
            state.operator_char = None
            _flush(state, outcome)
        return

    if state.is_escaped:
        state.is_escaped = False
        if char != NEWLINE:
            _append(state, char, outcome)
        return

    if char == profile.escape_char:
        if state.quote_level == 1:
            _append(state, char, outcome)
        else:
            state.is_escaped = True
        return

    if state.quote_level > 0 and char not in QUOTE_LEVELS:
        state.buffer.append(char)
        outcome.consumed = True
        return

    if profile.comment_start_char is not None and char == profile.comment_start_char:
        if state.has_token:
            _append(state, char, outcome)
        else:
            state.in_comment = True
        return

    if char in QUOTE_LEVELS:
        _handle_quote(state, char, outcome)
        return

    if char in OPERATOR_CHARS and not (char in PARENS and state.prev_char in CALL_PREFIX_CHARS):
        if state.has_token:
            _flush(state, outcome)
        outcome.set_shell_flag = True
        _append(state, char, outcome)
        if peek == char:
            state.operator_char = char
        else:
            _flush(state, outcome)
        return

    if char in WHITESPACE_CHARS:
        if state.has_token:
            _flush(state, outcome)
        elif char == NEWLINE:
            outcome.set_shell_flag = True
        return

    if char in profile.force_shell_chars:
        outcome.set_shell_flag = True

    _append(state, char, outcome)


def _handle_quote(state, char, outcome):
    level = QUOTE_LEVELS[char]

    if state.quote_level == level:
        if state.is_inner_quoted:
            state.buffer.append(char)
            state.is_inner_quoted = False
        state.quote_level = 0
        state.quote_start = -1
        _flush(state, outcome)
        return

    if state.quote_level > 0:
        # the other kind of quote is just a character here
        state.buffer.append(char)
        outcome.consumed = True
        return

    if state.has_token:
        state.is_inner_quoted = True
        _append(state, char, outcome)
    state.quote_level = level
    state.quote_start = state.pos


def tokenize(line: str, profile: PlatformProfile | None = None) -> tuple[list[str], bool]:
    """
    Split a command line into tokens.
    Returns the tokens and whether the line needs a shell to run.
    Raises UnmatchedQuoteError if a quote is left open.

    A newline that does not end a token counts as a command separator and
    sets the shell flag, so "ls \\n" and "#c\\nls" both need a shell even
    though only one command is left.
    """
    if profile is None:
        profile = default_profile()

    # trailing whitespace may be an escaped space, so only strip the left side
    text = line.lstrip()
    offset = len(line) - len(text)

    state = ScanState()
    last = len(text) - 1
    for i, char in enumerate(text):
        step(state, char, profile, text[i + 1] if i < last else None)

    if state.quote_level > 0:
        raise UnmatchedQuoteError(QUOTE_KINDS[state.quote_level], state.quote_start + offset)

    if state.has_token:
        state.flush()

    if not state.tokens:
        return [], False
    return state.tokens, state.requires_shell


def parse(text: str, profile: PlatformProfile | None = None) -> ParsedCommand:
    """ Split text into a program, its arguments and the shell requirement. """
    tokens, requires_shell = tokenize(text, profile)
    if not tokens:
        return ParsedCommand("", [], requires_shell=False, raw_text=text)
    return ParsedCommand(tokens[0], tokens[1:], requires_shell=requires_shell, raw_text=text,
                         empty_program=(tokens[0] == ""))
