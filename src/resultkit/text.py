"""Small text helpers."""

__all__ = ['capitalize']


def capitalize(s: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the tail keeps its case.

    Examples:
        >>> capitalize('jsonRpc')
        'JsonRpc'
        >>> capitalize('')
        ''
    """
    return s[:1].upper() + s[1:]
