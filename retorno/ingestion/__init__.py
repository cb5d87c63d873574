"""Workbook decoding and roster normalization."""
from retorno.ingestion.codec import CodecError, DecodeFailure, MissingSheet, decode, encode
from retorno.ingestion.loader import load_roster, record_from_row, records_from_rows

__all__ = [
    "CodecError",
    "DecodeFailure",
    "MissingSheet",
    "decode",
    "encode",
    "load_roster",
    "record_from_row",
    "records_from_rows",
]
