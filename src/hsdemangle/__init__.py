from hsdemangle.buffer import BufferPolicy, OutputBuffer
from hsdemangle.decoder import ZDecoder, demangle, demangle_bytes
from hsdemangle.encoder import zencode
from hsdemangle.error import DemangleError
from hsdemangle.symbol import DemangledSymbol, demangle_symbol, split_components

__all__ = [
    "BufferPolicy",
    "DemangleError",
    "DemangledSymbol",
    "OutputBuffer",
    "ZDecoder",
    "demangle",
    "demangle_bytes",
    "demangle_symbol",
    "split_components",
    "zencode",
]
