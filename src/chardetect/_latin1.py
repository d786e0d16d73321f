"""ISO-8859-1 codec with the C1 control range left unassigned.

Bytes 0x80-0x9F have no graphic meaning in ISO-8859-1, and text that
contains them is almost always windows-1252.  This codec refuses them so
that a buffer reported as ISO-8859-1 converts strictly only when it really
is ISO-8859-1.  It is registered with :mod:`codecs` on import under
:data:`CODEC_NAME`.
"""

from __future__ import annotations

import codecs

CODEC_NAME = "chardetect-latin1"

_C1_CONTROLS = range(0x80, 0xA0)

# U+FFFE marks an undefined slot for the charmap codec.
DECODING_TABLE = "".join(
    "\ufffe" if b in _C1_CONTROLS else chr(b) for b in range(256)
)
ENCODING_TABLE = codecs.charmap_build(DECODING_TABLE)


class Codec(codecs.Codec):
    def encode(self, input, errors="strict"):  # noqa: A002
        return codecs.charmap_encode(input, errors, ENCODING_TABLE)

    def decode(self, input, errors="strict"):  # noqa: A002
        return codecs.charmap_decode(input, errors, DECODING_TABLE)


class IncrementalEncoder(codecs.IncrementalEncoder):
    def encode(self, input, final=False):  # noqa: A002
        return codecs.charmap_encode(input, self.errors, ENCODING_TABLE)[0]


class IncrementalDecoder(codecs.IncrementalDecoder):
    def decode(self, input, final=False):  # noqa: A002
        return codecs.charmap_decode(input, self.errors, DECODING_TABLE)[0]


class StreamWriter(Codec, codecs.StreamWriter):
    pass


class StreamReader(Codec, codecs.StreamReader):
    pass


def _search(name: str) -> codecs.CodecInfo | None:
    if name.replace("-", "_") != CODEC_NAME.replace("-", "_"):
        return None
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamwriter=StreamWriter,
        streamreader=StreamReader,
    )


codecs.register(_search)
