"""
Identifier naming classifiers.

Pure predicates over a name string; nothing here touches the syntax tree.
"""


def is_camel_case(name: str) -> bool:
    """Return True for lowerCamelCase names such as ``myVar`` or ``myId``.

    Rejected: empty names, a leading non-lowercase character, underscores,
    whitespace, and two uppercase letters in a row (``myID``).
    """
    if not name:
        return False
    if not name[0].islower():
        return False

    previous_was_upper = False
    for ch in name[1:]:
        if ch == "_" or ch.isspace():
            return False
        if ch.isupper():
            if previous_was_upper:
                return False
            previous_was_upper = True
        else:
            previous_was_upper = False
    return True


def is_all_uppercase(name: str) -> bool:
    """Return True if every character is an uppercase letter.

    Digits and underscores are not accepted (``MAX_SIZE`` fails).  The empty
    string is vacuously uppercase.
    """
    return all(ch.isupper() for ch in name)
