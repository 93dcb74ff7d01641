#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# Co-Author: GitHub Copilot
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: YAML configuration loading with environment overrides.
#
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

# Environment variable -> key in the 'database' section
DATABASE_ENV_OVERRIDES = {
   'SESSIONAUTH_DB_HOST': 'host',
   'SESSIONAUTH_DB_PORT': 'port',
   'SESSIONAUTH_DB_NAME': 'name',
   'SESSIONAUTH_DB_USER': 'user',
   'SESSIONAUTH_DB_PASSWORD': 'password',
}


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
   database = dict(config.get('database') or {})
   for env_name, key in DATABASE_ENV_OVERRIDES.items():
      value = os.getenv(env_name)
      if value:
         database[key] = int(value) if key == 'port' else value
   config['database'] = database
   return config


def load_config(config_path: str = 'config.yaml') -> dict[str, Any]:
   """
   Load configuration from YAML file.

   Values from a .env file or the environment override the database section.

   Args:
      config_path: Path to config.yaml file.

   Returns:
      Configuration as a dictionary.

   Raises:
      RuntimeError: File missing, unreadable, or without a database section.
   """
   load_dotenv()
   config_file = Path(config_path)
   if not config_file.exists():
      raise RuntimeError(f"Failed to load config: file not found at {config_path}")

   try:
      with open(config_file, 'r', encoding='utf-8') as f:
         config = yaml.safe_load(f) or {}
   except (OSError, yaml.YAMLError) as e:
      raise RuntimeError(f"Failed to load config {config_path}: {e}") from e

   if not isinstance(config, dict):
      raise RuntimeError(f"Failed to load config {config_path}: top level must be a mapping")

   if 'database' not in config:
      raise RuntimeError(f"Database configuration not found in {config_path}")
   return _apply_env_overrides(config)
