import keyword
import re

PREFIX_TOKEN = "Icon"
SUFFIX_TOKEN = "Icon"

# PascalCase names that would shadow builtins, common typing names, or the names
# bound by the generated accessor module.
RESERVED_TYPE_NAMES = frozenset(
    {
        "Any",
        "ArithmeticError",
        "AssertionError",
        "AttributeError",
        "BaseException",
        "Callable",
        "Dict",
        "Dispatcher",
        "Ellipsis",
        "Enum",
        "Error",
        "Exception",
        "False",
        "IconConfig",
        "KeyError",
        "List",
        "Mapping",
        "None",
        "NotImplemented",
        "Optional",
        "Path",
        "Protocol",
        "Registry",
        "RegistryEntry",
        "Set",
        "True",
        "Tuple",
        "Type",
        "TypeError",
        "Union",
        "ValueError",
        "Warning",
    }
)

_SEGMENT_SEPARATORS = re.compile(r"[-\s_]+")
_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def to_pascal_case(raw_name: str) -> str:
    segments = _SEGMENT_SEPARATORS.split(raw_name)
    return "".join(segment[:1].upper() + segment[1:].lower() for segment in segments if segment)


def to_kebab_case(raw_name: str) -> str:
    segments = _SEGMENT_SEPARATORS.split(raw_name)
    return "-".join(segment.lower() for segment in segments if segment)


def is_reserved(name: str) -> bool:
    return keyword.iskeyword(name) or keyword.issoftkeyword(name) or name in RESERVED_TYPE_NAMES


def sanitize_identifier(raw_name: str) -> str:
    """Map a raw icon name to a grammar-safe base identifier, ignoring uniqueness."""
    name = to_pascal_case(raw_name)

    if not (name[:1].isascii() and (name[:1].isalpha() or name[:1] == "_")):
        name = f"{PREFIX_TOKEN}{name}"

    if is_reserved(name):
        name = f"{name}{SUFFIX_TOKEN}"

    name = _INVALID_CHARS.sub("_", name)

    # A trailing digit would be indistinguishable from a uniqueness counter.
    if name[-1:].isdigit():
        name = f"{name}{SUFFIX_TOKEN}"

    return name


def synthesize_identifier(raw_name: str, used: set[str]) -> str:
    """Return a unique identifier for ``raw_name`` and record it in ``used``.

    Collisions get an increasing counter starting at 2 (``Name``, ``Name2``,
    ``Name3``...). The result depends only on ``raw_name`` and the current
    contents of ``used``, so a fixed processing order gives identical output.
    """
    base_name = sanitize_identifier(raw_name)

    name = base_name
    counter = 2
    while name in used:
        name = f"{base_name}{counter}"
        counter += 1

    used.add(name)
    return name


def is_valid_identifier(name: str) -> bool:
    return _IDENTIFIER.fullmatch(name) is not None and not is_reserved(name)
