from pathlib import Path

import tomlkit
from tomlkit import TOMLDocument


def parse_manifest(text: str) -> TOMLDocument:
    return tomlkit.parse(text)


def dump_manifest(doc: TOMLDocument) -> str:
    return tomlkit.dumps(doc)


def read_manifest(path: Path) -> TOMLDocument:
    return parse_manifest(path.read_text(encoding="utf-8"))
