class UFOKitError(Exception):

    """
    The base exception for errors raised by ufokit.
    """


class UFOIOError(UFOKitError):

    """
    A filesystem operation failed, or a required file is missing.
    """

    def __init__(self, message, path=None):
        super(UFOIOError, self).__init__(message)
        self.path = path


class UFOParseError(UFOKitError):

    """
    A file was found but its contents could not be decoded.

    **fileName** is the file being read and **position** is a
    ``(line, column)`` tuple when the parser can report one.
    """

    def __init__(self, message, fileName=None, position=None):
        super(UFOParseError, self).__init__(message)
        self.fileName = fileName
        self.position = position

    def __str__(self):
        message = super(UFOParseError, self).__str__()
        location = []
        if self.fileName is not None:
            location.append(str(self.fileName))
        if self.position is not None:
            line, column = self.position
            if column is None:
                location.append("line %d" % line)
            else:
                location.append("line %d, column %d" % (line, column))
        if location:
            message = "%s (%s)" % (message, ", ".join(location))
        return message


class PropertyListParseError(UFOParseError):
    pass


class GlifParseError(UFOParseError):
    pass


class VersionIncompatibilityError(UFOKitError):

    """
    Data uses a feature that the target UFO or GLIF format
    version cannot represent.
    """


class NameCollisionError(UFOKitError):

    """
    No unique file name could be derived from a glyph or layer name.
    """


class UFOValidationError(UFOKitError):

    """
    A font failed structural validation. All findings are
    available in the **violations** list.
    """

    def __init__(self, violations, path=None):
        self.violations = list(violations)
        self.path = path
        lines = ["%d structural violation(s) found" % len(self.violations)]
        if path is not None:
            lines[0] += " in %s" % path
        for violation in self.violations:
            lines.append("  " + str(violation))
        super(UFOValidationError, self).__init__("\n".join(lines))
