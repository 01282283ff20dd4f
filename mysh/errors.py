class ShellError(Exception):
    pass

class UsageError(ShellError):
    pass

class LineTooLong(ShellError):
    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super(LineTooLong, self).__init__('input line too long (%d > %d characters)' % (length, limit))

class ParsingError(ShellError):
    def __init__(self, message, s, position):
        self.message = message
        self.s = s
        self.position = position

        assert position <= len(s)
        super(ParsingError, self).__init__('%s (position %d)' % (message, position))

class RedirectionError(ParsingError):
    pass

class PipelineError(ParsingError):
    pass

class WildcardError(ShellError):
    def __init__(self, pattern, error):
        self.pattern = pattern
        self.error = error
        super(WildcardError, self).__init__('glob: %s: %s' % (pattern, error))

class CommandNotFound(ShellError):
    def __init__(self, name, reason=None, status=127):
        self.name = name
        self.reason = reason or "command not found"
        self.status = status
        super(CommandNotFound, self).__init__("%s: %s" % (name, self.reason))
