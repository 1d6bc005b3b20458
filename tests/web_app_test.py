import sys
import os
import io
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from web.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def upload(name, content):
    return (io.BytesIO(content.encode('utf-8')), name)


def test_index(client):
    response = client.get('/')
    assert response.status_code == 200
    assert b'template_files' in response.data


def test_analyze(client):
    data = {
        'template_files': [
            upload('page.twig', '<div class="btn js-open {{ on ? \'btn-on\' : \'btn-off\' }}"></div>'),
            upload('Card.vue', '<template><p :class="[\'card\']"></p></template><style>.scoped-only {}</style>'),
        ],
        'css_files': [upload('app.css', '.btn {} .btn-on {} .card {} .stale {}')],
    }
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    assert response.status_code == 200
    body = response.get_json()
    assert body['report'] == {
        'cssClassesNotFoundInTemplates': ['stale'],
        'templateClassesNotFoundInCss': ['btn-off'],
    }
    assert body['counts']['template_files'] == 2
    assert body['counts']['css_classes'] == 4
    assert body['skipped'] == []


def test_analyze_with_vue_styles_and_custom_ignore(client):
    data = {
        'template_files': [upload('Card.vue', '<template><p class="card js-x"></p></template><style>.scoped-only {}</style>')],
        'css_files': [upload('app.css', '.card {}')],
        'scan_vue_styles': '1',
        'ignore': '^scoped-',
    }
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    body = response.get_json()
    assert body['report']['cssClassesNotFoundInTemplates'] == []
    assert body['report']['templateClassesNotFoundInCss'] == ['js-x']


def test_analyze_html_format(client):
    data = {
        'template_files': [upload('a.twig', '<div class="a"></div>')],
        'css_files': [upload('a.css', '.b {}')],
        'format': 'html',
    }
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    assert response.status_code == 200
    assert b'<code>b</code>' in response.data


def test_analyze_requires_both_sides(client):
    data = {'template_files': [upload('a.twig', '<div class="a"></div>')]}
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    assert response.status_code == 400


def test_analyze_invalid_mode(client):
    data = {
        'template_files': [upload('a.twig', '<div class="a"></div>')],
        'css_files': [upload('a.css', '.a {}')],
        'mode': 'ids',
    }
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    assert response.status_code == 400
    assert 'css_extract_mode' in response.get_json()['error']


def test_analyze_undecodable_upload_is_skipped(client):
    data = {
        'template_files': [upload('a.twig', '<div class="a"></div>')],
        'css_files': [(io.BytesIO(b'\xff\xfe\x00.x{}'), 'bad.css'), upload('a.css', '.a {}')],
    }
    response = client.post('/analyze', data=data, content_type='multipart/form-data')
    body = response.get_json()
    assert [item['path'] for item in body['skipped']] == ['bad.css']
    assert body['report']['cssClassesNotFoundInTemplates'] == []
