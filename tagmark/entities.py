# Character references
NBSP = '&nbsp;'
LT = '&lt;'
GT = '&gt;'
AMP = '&amp;'
QUOT = '&quot;'


def sanitize(s: str = '', amp=True, lt=True, gt=True, quot=True) -> str:
    """Escape markup characters in `s`.

    Each category can be switched off on its own. `&` goes first so the
    references inserted by the later replacements are left alone. Running
    the result through `sanitize` again escapes it a second time.
    """
    if amp:
        s = s.replace('&', AMP)
    if lt:
        s = s.replace('<', LT)
    if gt:
        s = s.replace('>', GT)
    if quot:
        s = s.replace('"', QUOT)
    return s
