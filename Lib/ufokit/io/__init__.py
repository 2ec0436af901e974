"""
Reading and writing of UFO directories.
"""


def load(path, validate=True, parallel=False, maxWorkers=None, **kwargs):
    """
    Read the UFO at **path** and return a :class:`ufokit.objects.font.Font`.
    Any other keyword arguments are passed to the font class.
    """
    from ufokit.objects.font import Font
    return Font(path, validate=validate, parallel=parallel, maxWorkers=maxWorkers, **kwargs)


def save(font, path=None, formatVersion=None, validate=True, parallel=False, maxWorkers=None):
    """
    Write **font** to **path**. See :meth:`ufokit.objects.font.Font.save`.
    """
    font.save(path=path, formatVersion=formatVersion, validate=validate, parallel=parallel, maxWorkers=maxWorkers)
    return font
