import sys
import os
import logging
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.css_extractor import CSSClassExtractor, extract_classes_from_css, remove_background_images
from core.exceptions import InvalidConfiguration, InvalidOption
from utils.class_utils import is_valid_class_name


def test_css_class_extraction():
    css = ".btn { color: red; } .btn-primary, .btn-secondary { color: blue; }"
    assert extract_classes_from_css(css, 'classes') == {'btn', 'btn-primary', 'btn-secondary'}


def test_default_mode_is_classes():
    assert extract_classes_from_css(".foo { margin: 0; }") == {'foo'}


def test_background_url_is_not_tokenized():
    css = ".icon { background: url(icon.png) no-repeat; }"
    assert extract_classes_from_css(css, 'classes') == {'icon'}


def test_background_image_quoted_url():
    css = '.hero { background-image: url("img/bg.large.jpg"); color: red; }'
    assert extract_classes_from_css(css) == {'hero'}


def test_other_url_functions_are_removed():
    css = '@import url(theme.print.css); @font-face { src: url(fonts/a.woff2) format("woff2"); } .x { }'
    assert extract_classes_from_css(css) == {'x'}


def test_remove_background_images_keeps_other_declarations():
    css = ".a { color: red; background: #fff url(a.png) no-repeat; margin: 0 }"
    stripped = remove_background_images(css)
    assert 'url' not in stripped
    assert 'color: red;' in stripped
    assert 'margin: 0' in stripped


def test_comments_are_ignored():
    css = "/* .old-rule { color: red; } */ .new-rule { color: blue; }"
    assert extract_classes_from_css(css) == {'new-rule'}


def test_decimal_numbers_are_not_classes():
    css = ".spacer { margin: .5em 1.5rem; opacity: 0.75; }"
    assert extract_classes_from_css(css) == {'spacer'}


def test_compound_and_pseudo_selectors():
    css = ".nav > .nav-item:hover, .card.is-open::before { } @media (max-width: 600px) { .m-hide { } }"
    assert extract_classes_from_css(css) == {'nav', 'nav-item', 'card', 'is-open', 'm-hide'}


def test_duplicates_collapse():
    css = ".a {} .a:hover {} .a .a {}"
    assert extract_classes_from_css(css) == {'a'}


def test_empty_stylesheet():
    assert extract_classes_from_css('') == set()


def test_selector_extraction():
    css = ".a, .b > p { x: 1 } #id:hover { }"
    assert extract_classes_from_css(css, 'selectors') == {'.a', '.b > p', '#id:hover'}


def test_selector_extraction_includes_at_rule_preludes():
    css = "@media (max-width: 600px) { .m { color: red; } }"
    assert extract_classes_from_css(css, 'selectors') == {'@media (max-width: 600px)', '.m'}


def test_selector_mode_warns(caplog):
    with caplog.at_level(logging.WARNING):
        CSSClassExtractor().extract(".a {}", 'selectors')
    assert 'best-effort' in caplog.text


def test_invalid_mode():
    with pytest.raises(InvalidOption):
        extract_classes_from_css(".a {}", 'ids')
    # also usable as the broader error kinds
    with pytest.raises(InvalidConfiguration):
        extract_classes_from_css(".a {}", '')
    with pytest.raises(ValueError):
        extract_classes_from_css(".a {}", 'CLASSES')


@pytest.mark.parametrize('name', ['foo', '-foo', '_bar', 'a1-b_c', 'Btn', 'x--y'])
def test_valid_class_names(name):
    assert is_valid_class_name(name)


@pytest.mark.parametrize('name', ['', 'foo bar', '1foo', 'foo.bar', 'a$b', 'foo\n', '-1x', 'a:b'])
def test_invalid_class_names(name):
    assert not is_valid_class_name(name)
