"""Exceptions raised while converting values to and from the wire format."""


class DecodeError(ValueError):
    """A value received from the server could not be decoded."""


class EncodeError(ValueError):
    """A value could not be encoded for sending to the server."""