from diffplus.core.models import CommandKind

COMMAND_ALIASES = {
    "b": CommandKind.BASE,
    "base": CommandKind.BASE,
    "d": CommandKind.DIFF,
    "diff": CommandKind.DIFF,
    "ls": CommandKind.LIST,
    "l": CommandKind.LIST,
    "list": CommandKind.LIST,
    "v": CommandKind.VIEW,
    "view": CommandKind.VIEW,
    "h": CommandKind.HELP,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
    "w": CommandKind.WHAT,
    "what": CommandKind.WHAT,
    "q": CommandKind.QUIT,
    "quit": CommandKind.QUIT,
    "e": CommandKind.QUIT,
    "exit": CommandKind.QUIT,
}

BASE_TOKENS = ("b", "base")

PROMPT = "diff+> "

FAREWELL = "Bye!"

HELP_TEXT = """\
Commands:
  b, base GROUP          Make GROUP the base group and show all groups
  d, diff GROUP [GROUP]  Diff two groups (second defaults to the base group)
  l, ls, list [GROUP...] List every file in each GROUP (default: base group)
  v, view                Show all groups
  w, what [GROUP...]     Show which group each GROUP resolves to
  h, help, ?             Show this help
  q, quit, e, exit       Leave diff+

GROUP can be:
  N                      a group index, e.g. 0 or 3
  b, base                the current base group
  PATTERN                a regular expression; the first group holding a
                         matching file path is used"""

FILES_HELP_TEXT = "Files to compare and group by identical content"

DIFF_OPTIONS_HELP_TEXT = (
    "Options passed to the comparator for every comparison.\n"
    "Split on whitespace; may be repeated. Example: --diff-options='-u -w'\n"
)

EPILOG_TEXT = """
Examples:
  Group a set of config files and explore how they differ
  %(prog)s /etc/app/*.conf

  Ignore whitespace changes when grouping and diffing
  %(prog)s --diff-options='-w' host1.conf host2.conf host3.conf

  Unified, colored diffs (the pager passes control sequences through)
  %(prog)s --diff-options='-u --color=always' *.txt

  Print the groups and exit (for scripts)
  %(prog)s --list *.txt > groups.txt
"""
