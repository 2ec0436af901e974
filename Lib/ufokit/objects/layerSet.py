from ufokit.objects.base import BaseObject
from ufokit.objects.layer import Layer


class LayerSet(BaseObject):

    """
    This object manages all layers in the font.

    This object behaves like a dict. For example, to get a particular
    layer::

        layer = layerSet["layer name"]

    If the layer name is None, the default layer will be retrieved.

    Layers are kept in layer order. Layer names are unique when layers
    are created through :meth:`newLayer`; renaming a layer is not
    checked and a duplicate is reported by the validator, as is a
    missing default layer.
    """

    def __init__(self, font=None, layerClass=None, libClass=None,
            guidelineClass=None, glyphClass=None,
            glyphContourClass=None, glyphPointClass=None, glyphComponentClass=None, glyphAnchorClass=None,
            glyphImageClass=None):
        super(LayerSet, self).__init__()
        self.setParent(font)

        if layerClass is None:
            layerClass = Layer
        self._layerClass = layerClass
        self._libClass = libClass
        self._glyphClass = glyphClass
        self._glyphContourClass = glyphContourClass
        self._glyphPointClass = glyphPointClass
        self._glyphComponentClass = glyphComponentClass
        self._glyphAnchorClass = glyphAnchorClass
        self._glyphImageClass = glyphImageClass
        self._guidelineClass = guidelineClass

        self._layers = []
        self._defaultLayer = None

    # --------------
    # Parent Objects
    # --------------

    def _get_font(self):
        return self.getParent()

    font = property(_get_font, doc="The :class:`Font` that this layer set belongs to.")

    # -------------
    # Default Layer
    # -------------

    def _get_defaultLayerName(self):
        if self._defaultLayer is None:
            return None
        return self._defaultLayer.name

    defaultLayerName = property(_get_defaultLayerName, doc="The name of the default layer.")

    def _get_defaultLayer(self):
        return self._defaultLayer

    def _set_defaultLayer(self, layer):
        if layer is None:
            raise ValueError("The default layer must not be None.")
        if not any(other is layer for other in self._layers):
            raise ValueError("The default layer must be in the layer set.")
        self._defaultLayer = layer

    defaultLayer = property(_get_defaultLayer, _set_defaultLayer, doc="The default :class:`Layer` object.")

    # -----------
    # Layer Order
    # -----------

    def _get_layerOrder(self):
        return [layer.name for layer in self._layers]

    def _set_layerOrder(self, order):
        order = list(order)
        if sorted(order) != sorted(self.layerOrder):
            raise ValueError("The layer order must contain the names of all layers.")
        self._layers = [self[name] for name in order]

    layerOrder = property(_get_layerOrder, _set_layerOrder, doc="The layer order from top to bottom.")

    def _get_layers(self):
        return list(self._layers)

    layers = property(_get_layers, doc="All :class:`Layer` objects in layer order, including any that share a name.")

    # -------------
    # Layer Creation
    # -------------

    def instantiateLayer(self):
        layer = self._layerClass(
            layerSet=self,
            libClass=self._libClass,
            glyphClass=self._glyphClass,
            glyphContourClass=self._glyphContourClass,
            glyphPointClass=self._glyphPointClass,
            glyphComponentClass=self._glyphComponentClass,
            glyphAnchorClass=self._glyphAnchorClass,
            guidelineClass=self._guidelineClass,
            glyphImageClass=self._glyphImageClass
        )
        return layer

    def newLayer(self, name):
        """
        Create a new :class:`Layer` and add it to
        the bottom of the layer order.
        """
        if name is None:
            raise ValueError("A layer name must not be None.")
        if name in self:
            raise KeyError("A layer named \"%s\" already exists." % name)
        layer = self.instantiateLayer()
        layer.name = name
        self._layers.append(layer)
        return layer

    def adoptLayer(self, layer):
        """
        Append **layer** itself to the bottom of the layer order,
        keeping its name even if another layer already uses it.
        This is used when loading and should not be needed externally.
        """
        if layer.layerSet is not None and layer.layerSet is not self:
            raise ValueError("This layer belongs to another layer set.")
        layer.setParent(self)
        self._layers.append(layer)

    # -------------
    # Dict Behavior
    # -------------

    def __iter__(self):
        return iter(list(self._layers))

    def __getitem__(self, name):
        if name is None:
            if self._defaultLayer is None:
                raise KeyError("The layer set has no default layer.")
            return self._defaultLayer
        for layer in self._layers:
            if layer.name == name:
                return layer
        raise KeyError("%s not in layers" % name)

    def __delitem__(self, name):
        layer = self[name]
        self._layers = [other for other in self._layers if other is not layer]
        if layer is self._defaultLayer:
            self._defaultLayer = None
        layer.setParent(None)

    def __len__(self):
        return len(self._layers)

    def __contains__(self, name):
        if name is None:
            return self._defaultLayer is not None
        return any(layer.name == name for layer in self._layers)

    def keys(self):
        return self.layerOrder

    # -----------------------------
    # Serialization/Deserialization
    # -----------------------------

    def getDataForSerialization(self, **kwargs):
        serialize = lambda item: item.getDataForSerialization()

        def get_layers(k):
            layers = []
            for layer in self._layers:
                isDefaultLayer = layer is self._defaultLayer
                layers.append((layer.name, serialize(layer), isDefaultLayer))
            return layers

        getters = [('layers', get_layers)]

        return self._serialize(getters, **kwargs)

    def setDataFromSerialization(self, data):
        for layer in list(self._layers):
            layer.setParent(None)
        self._layers = []
        self._defaultLayer = None
        for name, layerData, isDefault in data.get('layers', []):
            layer = self.newLayer(name)
            layer.setDataFromSerialization(layerData)
            if isDefault:
                self.defaultLayer = layer


def _test():
    """
    >>> layers = LayerSet()
    >>> default = layers.newLayer("public.default")
    >>> layers.defaultLayer = default
    >>> background = layers.newLayer("background")
    >>> layers.layerOrder
    ['public.default', 'background']
    >>> layers[None] is default
    True
    >>> layers.newLayer("background")
    Traceback (most recent call last):
        ...
    KeyError: 'A layer named "background" already exists.'
    >>> layers.layerOrder = ["background", "public.default"]
    >>> [layer.name for layer in layers]
    ['background', 'public.default']
    >>> background.name = "public.default"
    >>> len(layers), layers["public.default"] is background
    (2, True)
    >>> del layers[None]
    >>> layers.defaultLayer
    >>> None in layers
    False
    """


if __name__ == "__main__":
    import doctest
    doctest.testmod()
