"""
Vue Component Parser Module
Reads the ``<style>`` blocks of Vue single-file components.
"""

import logging
from typing import List

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class VueStyleParser:
    """Pulls stylesheet text out of a single-file component."""

    def __init__(self, include_preprocessed: bool = False):
        # lang="scss" and friends are not plain CSS; skipped unless asked for
        self.include_preprocessed = include_preprocessed

    def extract_style_blocks(self, content: str) -> List[str]:
        """Return the text of every ``<style>`` block outside ``<template>``."""
        soup = BeautifulSoup(content, 'html.parser')
        blocks = []
        for style in soup.find_all('style'):
            if style.find_parent('template') is not None:
                continue
            lang = (style.get('lang') or 'css').lower()
            if lang != 'css' and not self.include_preprocessed:
                logger.debug(f"Skipping <style lang=\"{lang}\"> block")
                continue
            text = str(style.string or '')
            if text.strip():
                blocks.append(text)
        logger.debug(f"Found {len(blocks)} style block(s)")
        return blocks

    def extract_styles(self, content: str) -> str:
        """All style blocks joined into one stylesheet."""
        return '\n'.join(self.extract_style_blocks(content))
