import os

from bindcodec.conf import DEFAULT_SETTINGS_FILEPATH

os.environ['BINDCODEC_CONFIG_YAML'] = os.environ.get('BINDCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_FILEPATH)
