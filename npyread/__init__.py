"""
    Python reader for the NumPy array interchange formats.

    This format stores a single multi-dimensional array (.npy) or a zip archive of named arrays (.npz).
    Arrays are decoded into numpy arrays of the stored shape, element type and byte order,
    without going through numpy's own loading machinery.

    A single array is stored in a binary file as follows:
    <MAGIC PREFIX><MAJOR VERSION><MINOR VERSION><HEADER LENGTH><HEADER TEXT><ELEMENT BYTES>
"""
from ._hl.files import File, load_file, read_file
from ._hl.reader import decode_array, load, read
from .errors import NpyError, InvalidContainer, TruncatedPayload, InvalidHeader, ExtractionFailure, \
    UnreadableSource
from .version import version as __version__
