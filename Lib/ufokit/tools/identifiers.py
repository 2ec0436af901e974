import uuid


def makeRandomIdentifier(existing=None):
    """
    Make a random identifier. Identifiers are version 4 UUIDs,
    so collisions are not checked for. **existing** is accepted
    for API compatibility and may be used to reject a value that
    is already taken in the owning glyph.

    >>> identifier = makeRandomIdentifier()
    >>> len(identifier)
    36
    >>> makeRandomIdentifier() != makeRandomIdentifier()
    True
    """
    while True:
        identifier = str(uuid.uuid4())
        if existing is None or identifier not in existing:
            return identifier


if __name__ == "__main__":
    import doctest
    doctest.testmod()
