"""where the shell gets its lines from

a driver is any callable taking the prompt and returning the next line, or
None once the input is exhausted.
"""


def read_line(prompt):
    try:
        return input(prompt)
    except EOFError:
        return None


def from_lines(lines):
    """a driver that hands out `lines` one by one, ignoring the prompt"""
    it = iter(lines)

    def read(prompt):
        return next(it, None)
    return read
