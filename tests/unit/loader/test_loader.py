from dataclasses import dataclass, field
from unittest.mock import Mock

import pytest

from niml.errors import FieldError, RecordTypeError
from niml.loader import loads
from niml.parsers import NimlParser, ParserConfig
from niml.records import RecordFiller


@dataclass
class Server:
    host: str = ""
    port: int = 0


@dataclass
class Config:
    name: str = field(default="", metadata={"niml": "app"})
    server: Server = field(default_factory=Server)


class TestLoads:
    def test_parses_and_fills(self) -> None:
        cfg = loads('/ app = "demo"\n(server)\n/ host = h\n/ port = 80', Config())

        assert cfg == Config(name="demo", server=Server(host="h", port=80))

    def test_returns_same_instance(self) -> None:
        cfg = Config()

        assert loads("", cfg) is cfg

    def test_target_checked_before_parsing(self) -> None:
        parser = Mock()

        with pytest.raises(RecordTypeError):
            loads("/ a = 1", {"a": None}, parser=parser)

        parser.parse.assert_not_called()

    def test_class_target_rejected(self) -> None:
        with pytest.raises(RecordTypeError, match="got the class Config"):
            loads("/ app = x", Config)

    def test_coercion_failure_propagates(self) -> None:
        with pytest.raises(FieldError, match="server.port"):
            loads("(server)\n/ port = eighty", Config())

    def test_custom_parser_and_filler(self) -> None:
        parser = NimlParser(ParserConfig(comment_marker="#"))
        filler = RecordFiller()

        cfg = loads("/ app = demo # note", Config(), parser=parser, filler=filler)

        assert cfg.name == "demo"
