SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
QUOTE_LEVELS = {SINGLE_QUOTE: 1, DOUBLE_QUOTE: 2}
QUOTE_KINDS = {1: "single", 2: "double"}

OPERATOR_CHARS = frozenset("&><|[]()")
PARENS = frozenset("()")
# $(...) and @(...) keep their parens
CALL_PREFIX_CHARS = frozenset("@$")
WHITESPACE_CHARS = frozenset(" \t\n")
NEWLINE = "\n"

POSIX_ESCAPE_CHAR = "\\"
POSIX_COMMENT_CHAR = "#"
POSIX_FORCE_SHELL_CHARS = frozenset("!`${};")

WINDOWS_ESCAPE_CHAR = "^"
WINDOWS_FORCE_SHELL_CHARS = frozenset("!%+")

POSIX_SHELL = "sh"
POSIX_SHELL_ARGS = ("-c",)
POSIX_SHELL_ENV_KEY = "SHELL"

WINDOWS_SHELL = "cmd.exe"
WINDOWS_SHELL_ARGS = ("/c",)
WINDOWS_SHELL_ENV_KEY = "COMSPEC"
WINDOWS_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"
WINDOWS_LINE_BREAK = "\r\n"

TEMP_SCRIPT_PREFIX = "shell_cmd"
TEMP_SCRIPT_SUFFIX = ".bat"

COMMAND_NOT_FOUND_STATUS = 127
PARSE_ERROR_STATUS = 2
