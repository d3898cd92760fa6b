from structlog.testing import capture_logs

from bindcodec.union import union_value
from bindcodec_tests import unittest


@union_value
class Choice:
    number: int | None = None


class UnionCodecLoggingTestCase(unittest.TestCase):
    def test_build_is_logged(self) -> None:
        with capture_logs() as logs:
            context = self.create_context()
            context.get_union_codec(Choice)
            context.get_union_codec(Choice)
        events = [log['event'] for log in logs]
        self.assertEqual(events.count('union codec built'), 1)
        self.assertEqual(events.count('union codec cached'), 1)
        built = next(log for log in logs if log['event'] == 'union codec built')
        self.assertEqual(built['union'], 'Choice')
        self.assertEqual(built['variants'], ['number'])
        self.assertEqual(built['log_level'], 'debug')

    def test_settings_load_is_logged(self) -> None:
        from bindcodec.conf import STRICT_SETTINGS_FILEPATH
        from bindcodec.conf.get_settings import _load_settings_singleton, _reset_settings_singleton

        _reset_settings_singleton()
        try:
            with capture_logs() as logs:
                _load_settings_singleton(STRICT_SETTINGS_FILEPATH)
        finally:
            _reset_settings_singleton()
        self.assertEqual(logs, [{'event': 'codec settings loaded', 'source': STRICT_SETTINGS_FILEPATH,
                                 'log_level': 'debug'}])
