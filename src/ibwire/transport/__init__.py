"""Socket-facing components: the reader thread and its channel to the decoder."""

from .channel import Channel
from .reader import Reader

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
