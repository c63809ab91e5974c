'''Global configuration system supporting JSON5 files and command-line overrides'''

import json5
import argparse
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = 'hostbind.json5'


class Config:
    '''Global configuration singleton'''

    _instance = None
    _initialized = False

    # Default configuration values
    _defaults = {
        'aux_paths': [],
        'aux_file_pattern': '_{name}_extra.py',
        'clone_method': 'clone',
        'log_level': 'WARNING',
    }

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.reset()
            self._initialized = True

    def reset(self):
        '''Drop file values and CLI overrides, keep defaults only'''
        self._config = {key: list(value) if isinstance(value, list) else value for key, value in self._defaults.items()}
        self._cli_overrides = {}

    def load_file(self, filepath: str | Path) -> bool:
        '''Load configuration from JSON5 file'''
        filepath = Path(filepath)
        if not filepath.exists():
            return False

        try:
            with open(filepath, 'r', encoding = 'utf-8') as f:
                data = json5.loads(f.read())

        except (OSError, ValueError) as e:
            logger.warning('Failed to load config from %s: %s', filepath, e)
            return False

        if not isinstance(data, dict):
            logger.warning('Ignoring config %s: top level must be an object', filepath)
            return False

        self._config.update(data)
        logger.debug('Loaded config from %s', filepath)
        return True

    def load_defaults(self):
        '''Load the project config from the working directory'''
        self.load_file(Path.cwd() / CONFIG_FILE_NAME)

    def parse_args(self, args: list[str] = None):
        '''Parse command-line arguments and override config'''
        parser = argparse.ArgumentParser(
            description = 'hostbind configuration',
            add_help = False
        )

        parser.add_argument(
            '--config',
            type = str,
            help = 'Path to config file'
        )

        parser.add_argument(
            '--aux-path',
            action = 'append',
            dest = 'aux_paths',
            help = 'Extra directory searched for auxiliary code (repeatable)'
        )

        parser.add_argument(
            '--log-level',
            type = str.upper,
            choices = ['DEBUG', 'INFO', 'WARNING', 'ERROR'],
            help = 'Logging level'
        )

        # Parse known args, ignore unknown
        parsed, _ = parser.parse_known_args(args)

        # Load config file if specified
        if parsed.config:
            self.load_file(parsed.config)

        # Apply command-line overrides
        if parsed.aux_paths:
            self._cli_overrides['aux_paths'] = parsed.aux_paths

        if parsed.log_level:
            self._cli_overrides['log_level'] = parsed.log_level

    def get(self, key: str, default: Any = None) -> Any:
        '''Get configuration value'''
        # CLI overrides have highest priority
        if key in self._cli_overrides:
            return self._cli_overrides[key]

        # Then config file values
        if key in self._config:
            return self._config[key]

        # Finally default value
        return default

    def set(self, key: str, value: Any):
        '''Set configuration value at runtime'''
        self._config[key] = value

    @property
    def aux_paths(self) -> list[Path]:
        '''Directories searched for auxiliary code, before the bundled one'''
        return [Path(p) for p in self.get('aux_paths') or []]

    @property
    def aux_file_pattern(self) -> str:
        '''File name pattern of auxiliary code, formatted with the module name'''
        return self.get('aux_file_pattern')

    @property
    def clone_method(self) -> str:
        '''Name of the host clone operation'''
        return self.get('clone_method')

    @property
    def log_level(self) -> str:
        return str(self.get('log_level')).upper()


# Global config instance
_config = Config()


def get_config() -> Config:
    '''Get global config instance'''
    return _config


def init_config(args: list[str] = None):
    '''Initialize configuration system'''
    _config.load_defaults()
    if args is not None:
        _config.parse_args(args)
