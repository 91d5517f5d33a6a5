__author__ = 'Aaron Hosford'
__all__ = [
    'InvalidArgument',
]


class InvalidArgument(TypeError):
    """Raised when an anagram table operation receives an argument of the wrong type or shape."""

    def __init__(self, msg=None, method=None, value=None):
        super().__init__(msg, method, value)
        self.msg = msg
        self.method = method
        self.value = value

    def __str__(self):
        if self.method is None:
            return str(self.msg)
        return '%s(): %s Value: %r' % (self.method, self.msg, self.value)

    def __repr__(self):
        return type(self).__name__ + repr((self.msg, self.method, self.value))
