from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

import main as cli


@pytest.fixture
def services(service_forms, service_drive):
    with patch('main.prep_services', return_value=(service_forms, service_drive)) as mock_prep:
        yield mock_prep


def test_create_prints_urls(tmp_path, services, service_forms):
    path_yaml = tmp_path / 'form.yaml'
    path_yaml.write_text('title: Quick\nquestions:\n  - type: text\n    title: Name\n', encoding='utf-8')

    result = CliRunner().invoke(cli.main, ['--dir-credentials', str(tmp_path), 'create', str(path_yaml)])

    assert result.exit_code == 0, result.output
    assert 'Edit URL: https://docs.google.com/forms/d/form123/edit' in result.output
    assert 'View URL: https://docs.google.com/forms/d/form123/viewform' in result.output
    services.assert_called_once_with(str(tmp_path))


def test_create_rejects_invalid_grid(tmp_path, services):
    path_yaml = tmp_path / 'form.yaml'
    path_yaml.write_text('title: Bad\nquestions:\n  - type: grid\n    title: G\n', encoding='utf-8')

    result = CliRunner().invoke(cli.main, ['create', str(path_yaml)])

    assert result.exit_code != 0
    assert 'requires rows and columns' in result.output


def test_create_rejects_malformed_yaml(tmp_path, services, service_forms):
    path_yaml = tmp_path / 'bad.yaml'
    path_yaml.write_text('title: [unclosed\n', encoding='utf-8')

    result = CliRunner().invoke(cli.main, ['create', str(path_yaml)])

    assert result.exit_code == 1
    assert 'Invalid YAML' in result.output
    service_forms.forms().batchUpdate().execute.assert_not_called()


def test_update_rejects_yaml_without_title(tmp_path, services, service_forms):
    path_yaml = tmp_path / 'untitled.yaml'
    path_yaml.write_text('questions:\n  - type: text\n    title: Name\n', encoding='utf-8')

    result = CliRunner().invoke(cli.main, ['update', 'form123', str(path_yaml)])

    assert result.exit_code == 1
    assert "Missing key: 'title'" in result.output
    service_forms.forms().batchUpdate().execute.assert_not_called()


def test_create_missing_file(services):
    result = CliRunner().invoke(cli.main, ['create', 'does-not-exist.yaml'])

    assert result.exit_code != 0


def test_missing_credentials(tmp_path):
    path_yaml = tmp_path / 'form.yaml'
    path_yaml.write_text('title: Quick\n', encoding='utf-8')

    result = CliRunner().invoke(cli.main, ['--dir-credentials', str(tmp_path), 'create', str(path_yaml)])

    assert result.exit_code != 0
    assert 'credentials.json not found' in result.output


def test_list_without_forms(services, service_drive):
    service_drive.files().list().execute.return_value = {'files': []}

    result = CliRunner().invoke(cli.main, ['list'])

    assert result.exit_code == 0
    assert 'No forms found.' in result.output


def test_delete_selected_forms(services, service_drive):
    service_drive.files().list().execute.return_value = {
        'files': [
            {'id': 'id1', 'name': 'Form 1', 'createdTime': 't1'},
            {'id': 'id2', 'name': 'Form 2', 'createdTime': 't2'},
        ]
    }

    result = CliRunner().invoke(cli.main, ['delete'], input='2\n')

    assert result.exit_code == 0, result.output
    assert 'Deleting 1 form(s)...' in result.output
    service_drive.files().delete.assert_called_with(fileId='id2')


def test_delete_cancelled(services, service_drive):
    service_drive.files().list().execute.return_value = {
        'files': [{'id': 'id1', 'name': 'Form 1', 'createdTime': 't1'}]
    }
    service_drive.files().delete.reset_mock()

    result = CliRunner().invoke(cli.main, ['delete'], input='\n')

    assert result.exit_code == 0
    assert 'No forms deleted.' in result.output
    service_drive.files().delete.assert_not_called()


def test_validate_reports_issues(services, service_forms, form, l_response):
    service_forms.forms().get().execute.return_value = form
    service_forms.forms().responses().list().execute.return_value = {'responses': l_response}

    result = CliRunner().invoke(cli.main, ['validate', 'form123'])

    assert result.exit_code == 0, result.output
    assert 'Found 1 potential issue(s):' in result.output
    assert 'Question: How did you hear about us?' in result.output


def test_export(tmp_path, services, service_forms, form, l_response):
    service_forms.forms().get().execute.return_value = form
    service_forms.forms().responses().list().execute.return_value = {'responses': l_response}
    path_csv = tmp_path / 'out.csv'

    result = CliRunner().invoke(cli.main, ['export', 'form123', str(path_csv)])

    assert result.exit_code == 0, result.output
    assert 'Exported 2 response(s)' in result.output
    assert path_csv.exists()


def test_count(services, service_forms, l_response):
    service_forms.forms().responses().list().execute.return_value = {'responses': l_response}

    result = CliRunner().invoke(cli.main, ['count', 'form123'])

    assert result.exit_code == 0
    assert result.output.strip() == '2'


def test_example(services, service_forms):
    result = CliRunner().invoke(cli.main, ['example'])

    assert result.exit_code == 0, result.output
    assert 'Success! Form created with ID: form123' in result.output


def test_api_error_exits_non_zero(services, service_forms):
    from googleapiclient.errors import HttpError

    service_forms.forms().responses().list().execute.side_effect = HttpError(
        resp=Mock(status=403, reason='Forbidden'), content=b'denied'
    )

    result = CliRunner().invoke(cli.main, ['count', 'form123'])

    assert result.exit_code != 0
    assert 'Google API error' in result.output
