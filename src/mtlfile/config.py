import os

# Encoding used when reading and writing .mtl files from disk
MTL_ENCODING = os.environ.get("MTL_ENCODING", "utf-8")

def get_encoding() -> str:
    return MTL_ENCODING
