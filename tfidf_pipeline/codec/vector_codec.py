# tfidf_pipeline/codec/vector_codec.py
"""
Vector Codec Module
Binary encoding of SparseWeightVector

Layout, big-endian:
    int32   doc id
    int32   number of entries N
    N times:
        int32       term length L in UTF-16 code units
        L x uint16  UTF-16 code units of the term
        float64     weight
"""
import io
import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional

from tfidf_pipeline.errors import DecodeError, EncodingOverflow, TruncatedInput
from tfidf_pipeline.utils.logger import setup_logger
from tfidf_pipeline.utils.text_utils import INT32_MAX, INT32_MIN
from tfidf_pipeline.vectors.sparse_vector import SparseWeightVector

logger = setup_logger("vector_codec")

INT32 = struct.Struct(">i")
FLOAT64 = struct.Struct(">d")
CODE_UNIT_SIZE = 2
TERM_ENCODING = "utf-16-be"
# Lone surrogates are valid code units in the format
TERM_ERRORS = "surrogatepass"


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of decoding one vector.

    ``complete`` is False when the data ended early; ``vector`` then holds
    only the entries that were read in full.
    """

    vector: SparseWeightVector
    complete: bool
    bytes_read: int
    expected_entries: Optional[int] = None


def _encode_term(term: str) -> bytes:
    return term.encode(TERM_ENCODING, TERM_ERRORS)


def _check_int32(value: int, field: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field} must be an int, got {type(value).__name__}")
    if value < INT32_MIN or value > INT32_MAX:
        raise EncodingOverflow(f"{field} {value} does not fit in a signed 32-bit field")


class VectorCodec:
    """
    Encoder/decoder for the weight vector wire format
    """

    def encode(self, vector: SparseWeightVector) -> bytes:
        """
        Serialize a vector.

        Args:
            vector: Vector to encode

        Returns:
            Encoded bytes

        Raises:
            EncodingOverflow: If the doc id, entry count or a term length exceeds 32 bits
        """
        buffer = io.BytesIO()
        self.write(vector, buffer)
        return buffer.getvalue()

    def write(self, vector: SparseWeightVector, stream: BinaryIO) -> int:
        """
        Serialize a vector to a binary stream.

        All fields are validated before the first byte is written.

        Returns:
            Number of bytes written
        """
        _check_int32(vector.doc_id, "doc id")
        _check_int32(len(vector), "entry count")
        encoded_terms = []
        for term, _ in vector:
            units = _encode_term(term)
            _check_int32(len(units) // CODE_UNIT_SIZE, f"length of term {term[:32]!r}")
            encoded_terms.append(units)

        parts = [INT32.pack(vector.doc_id), INT32.pack(len(vector))]
        for units, (_, weight) in zip(encoded_terms, vector):
            parts.append(INT32.pack(len(units) // CODE_UNIT_SIZE))
            parts.append(units)
            parts.append(FLOAT64.pack(weight))
        data = b"".join(parts)
        stream.write(data)
        return len(data)

    def decode(self, data: bytes) -> DecodeResult:
        """
        Deserialize a vector from bytes.

        Trailing bytes after the vector are ignored; ``bytes_read`` tells
        where the vector ended.

        Args:
            data: Encoded bytes

        Returns:
            DecodeResult, incomplete if the data ended early

        Raises:
            DecodeError: If a count or length field is negative
        """
        return self.read(io.BytesIO(data))

    def decode_strict(self, data: bytes) -> SparseWeightVector:
        """
        Deserialize a vector, treating truncated data as an error.

        Raises:
            TruncatedInput: If the data ended early, the partial result is attached
        """
        result = self.decode(data)
        if not result.complete:
            raise TruncatedInput(
                f"Encoded vector truncated after {result.bytes_read} bytes "
                f"({len(result.vector)} of {result.expected_entries} entries read)",
                partial=result,
            )
        return result.vector

    def read(self, stream: BinaryIO) -> DecodeResult:
        """
        Deserialize one vector from a binary stream.
        """
        reader = _Reader(stream)
        vector = SparseWeightVector()

        doc_id = reader.read_int()
        if doc_id is None:
            return self._partial(vector, reader, None)
        vector.set_doc_id(doc_id)

        count = reader.read_int()
        if count is None:
            return self._partial(vector, reader, None)
        if count < 0:
            raise DecodeError(f"Negative entry count {count} for document {doc_id}")

        for i in range(count):
            length = reader.read_int()
            if length is None:
                return self._partial(vector, reader, count)
            if length < 0:
                raise DecodeError(f"Negative term length {length} in entry {i} of document {doc_id}")
            units = reader.read(length * CODE_UNIT_SIZE)
            if units is None:
                return self._partial(vector, reader, count)
            weight = reader.read_double()
            if weight is None:
                return self._partial(vector, reader, count)
            vector.add(units.decode(TERM_ENCODING, TERM_ERRORS), weight)

        return DecodeResult(vector, True, reader.position, count)

    def iter_read(self, stream: BinaryIO) -> Iterator[DecodeResult]:
        """
        Read consecutive vectors until the end of the stream.

        Stops after the first incomplete vector.
        """
        while True:
            start = stream.read(1)
            if not start:
                return
            result = self.read(_Prefixed(start, stream))
            yield result
            if not result.complete:
                return

    def _partial(self, vector: SparseWeightVector, reader: "_Reader", expected: Optional[int]) -> DecodeResult:
        logger.warning(
            f"Unexpected end of data after {reader.position} bytes, "
            f"returning {len(vector)} of {expected if expected is not None else '?'} entries "
            f"for document {vector.doc_id}"
        )
        return DecodeResult(vector, False, reader.position, expected)


class _Reader:
    """Reads exact-size fields, returning None at end of data."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.position = 0

    def read(self, size: int) -> Optional[bytes]:
        data = self.stream.read(size) if size else b""
        self.position += len(data)
        if len(data) < size:
            return None
        return data

    def read_int(self) -> Optional[int]:
        data = self.read(INT32.size)
        return None if data is None else INT32.unpack(data)[0]

    def read_double(self) -> Optional[float]:
        data = self.read(FLOAT64.size)
        return None if data is None else FLOAT64.unpack(data)[0]


class _Prefixed:
    """Binary stream with some already consumed bytes pushed back in front."""

    def __init__(self, prefix: bytes, stream: BinaryIO):
        self.prefix = prefix
        self.stream = stream

    def read(self, size: int) -> bytes:
        head, self.prefix = self.prefix[:size], self.prefix[size:]
        if len(head) < size:
            head += self.stream.read(size - len(head))
        return head
