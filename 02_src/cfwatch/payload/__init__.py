"""Payload module."""

from .payload import ABSENT, DecodeResult, Payload, decode_payload

__all__ = ["ABSENT", "DecodeResult", "Payload", "decode_payload"]
