from typing import Any, Optional
from unittest import TestCase as _TestCase, main as ut_main

from structlog import get_logger

from bindcodec.codecs import DEFAULT_TYPE_MAP, Codec, TypeMap
from bindcodec.conf.settings import CodecSettings
from bindcodec.context import CodecContext

logger = get_logger()
main = ut_main


class TestCase(_TestCase):
    # XXX: subclasses can override these to run every test with other settings or codecs
    settings: Optional[CodecSettings] = None
    type_map: TypeMap = DEFAULT_TYPE_MAP

    def setUp(self) -> None:
        self.log = logger.new()
        self.context = self.create_context()

    def create_context(self, **settings_overrides: Any) -> CodecContext:
        settings = self.settings or CodecSettings()
        if settings_overrides:
            settings = settings.model_copy(update=settings_overrides)
        return CodecContext(settings=settings, type_map=self.type_map)

    def codec(self, type_: Any) -> Codec:
        return self.context.get_codec(type_)

    def assertRoundTrip(self, codec: Codec, value: Any) -> None:
        """Check that encoding then decoding `value` gives back an equal value."""
        external = codec.encode(value)
        self.log.debug('round trip', value=value, external=external)
        self.assertEqual(codec.decode(external), value)
