#!/usr/bin/env python3
"""Shared logger for the analyzer and its scripts."""
import logging

from analyzer.const import LOG_FORMAT, LOG_LEVEL


logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger('analyzer')
