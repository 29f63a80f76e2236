from cssbuilder.codec.json_codec import CodecError, decode, encode

__all__ = ["encode", "decode", "CodecError"]
