"""
Terminal colours for log messages.

Every function wraps a string with ANSI escape sequences, the prefix
functions (``bad``, ``good``, ``info``, ``run``) additionally put
a marker like ``[+]`` in front of the message.
"""

END = '\033[0m'


def _paint(code, msg):
    return f'\033[{code}m{msg}{END}'


def red(msg):
    return _paint('91', msg)


def green(msg):
    return _paint('92', msg)


def yellow(msg):
    return _paint('93', msg)


def grey(msg):
    return _paint('90', msg)


def info(msg):
    """prefix a message with a yellow ``[!]``"""
    return f"{yellow('[!]')} {msg}"


def bad(msg):
    """prefix a message with a red ``[-]``"""
    return f"{red('[-]')} {msg}"


def good(msg):
    """prefix a message with a green ``[+]``"""
    return f"{green('[+]')} {msg}"


def run(msg):
    """prefix a message with ``[~]``"""
    return f"[~] {msg}"
