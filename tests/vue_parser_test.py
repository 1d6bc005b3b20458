import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.vue_parser import VueStyleParser

SFC = """
<template>
  <div class="card">
    <style>.inside-template { }</style>
  </div>
</template>

<script>
export default { name: 'Card' }
</script>

<style scoped>
.card { padding: 1rem; }
</style>

<style lang="scss">
.card { .title { font-weight: bold; } }
</style>
"""


def test_extracts_plain_css_blocks():
    parser = VueStyleParser()
    blocks = parser.extract_style_blocks(SFC)
    assert len(blocks) == 1
    assert '.card { padding: 1rem; }' in blocks[0]


def test_styles_inside_template_are_skipped():
    parser = VueStyleParser()
    assert 'inside-template' not in parser.extract_styles(SFC)


def test_preprocessed_blocks_on_request():
    parser = VueStyleParser(include_preprocessed=True)
    styles = parser.extract_styles(SFC)
    assert '.title' in styles
    assert '.card { padding: 1rem; }' in styles


def test_component_without_styles():
    parser = VueStyleParser()
    assert parser.extract_style_blocks('<template><p class="x"></p></template>') == []
    assert parser.extract_styles('') == ''
