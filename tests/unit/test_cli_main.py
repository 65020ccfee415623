"""
Unit tests for the CLI.

Tests global options, configuration overrides and each command, with the
categories client replaced by a mock.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch
from uuid import UUID

import pytest
import structlog
from click.testing import CliRunner

from skycategories.cli.main import cli
from skycategories.exceptions import TransportError, UnexpectedStatusError
from skycategories.sdk.models import (
    AssociateCategoryWithSkillRequest,
    Category,
    CreateCategoryRequest,
    DisassociateCategoryFromSkillRequest,
    GetCategoriesForSkillResponse,
    GetSkillIDsForCategoryResponse,
)

from tests.conftest import CATEGORY_ID, PROJECT_ID, SKILL_ID


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep log output out of command output."""
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    with patch('skycategories.cli.main.setup_logging') as mock_setup:
        yield mock_setup
    structlog.reset_defaults()


@pytest.fixture
def config_args(temp_dir: Path):
    """Point the CLI at a config file that does not exist, so defaults apply."""
    return ['--config', str(temp_dir / "config.yaml")]


@pytest.fixture
def mock_client():
    """Patch client construction and yield the client the commands will use."""
    with patch('skycategories.cli.context.CategoriesClient') as mock_cls:
        client = MagicMock()
        mock_cls.from_config.return_value.__enter__.return_value = client
        client.from_config = mock_cls.from_config
        yield client


@pytest.fixture
def runner():
    return CliRunner(env={
        'SKYCATEGORIES_BASE_URL': None,
        'SKYCATEGORIES_API_KEY': None,
        'SKYCATEGORIES_TOKEN': None,
    })


@pytest.fixture
def sample_category(category_payload) -> Category:
    return Category.from_dict(category_payload)


class TestCLIMain:
    """Test CLI main entry point."""

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'Sky Categories' in result.output
        assert '--config' in result.output
        assert '--base-url' in result.output
        assert '--token' in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert 'skycategories' in result.output

    def test_invalid_config_exits(self, runner, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("client:\n  timeout: -1\n")

        result = runner.invoke(cli, ['--config', str(path), 'category', 'get', '-c', CATEGORY_ID])

        assert result.exit_code == 1
        assert 'Invalid configuration' in result.output

    def test_options_override_config(self, runner, config_args, mock_client, sample_category):
        mock_client.get_category.return_value = sample_category

        result = runner.invoke(cli, config_args + [
            '--base-url', 'http://override:9000',
            '--api-key', 'cli-key',
            '--token', 'Bearer cli',
            'category', 'get', '--category-id', CATEGORY_ID,
        ])

        assert result.exit_code == 0, result.output
        client_config = mock_client.from_config.call_args[0][0]
        assert client_config.base_url == 'http://override:9000'
        assert client_config.api_key == 'cli-key'
        assert client_config.token == 'Bearer cli'

    def test_log_level_option(self, runner, config_args, mock_client, sample_category, quiet_logging):
        mock_client.get_category.return_value = sample_category

        result = runner.invoke(cli, config_args + [
            '--log-level', 'debug', 'category', 'get', '-c', CATEGORY_ID,
        ])

        assert result.exit_code == 0, result.output
        quiet_logging.assert_called_once_with(level='DEBUG', log_file=None, json_format=False)

    def test_env_vars_override_config(self, config_args, mock_client, sample_category):
        mock_client.get_category.return_value = sample_category
        runner = CliRunner(env={'SKYCATEGORIES_BASE_URL': 'http://from-env:7000'})

        result = runner.invoke(cli, config_args + ['category', 'get', '-c', CATEGORY_ID])

        assert result.exit_code == 0, result.output
        assert mock_client.from_config.call_args[0][0].base_url == 'http://from-env:7000'


class TestCategoryCommands:
    """Test category commands."""

    def test_create(self, runner, config_args, mock_client, sample_category):
        mock_client.create_category.return_value = sample_category

        result = runner.invoke(cli, config_args + ['category', 'create', '--name', 'Sales'])

        assert result.exit_code == 0, result.output
        mock_client.create_category.assert_called_once_with(CreateCategoryRequest(name='Sales'))
        assert 'Sales' in result.output
        assert CATEGORY_ID in result.output

    def test_get_json(self, runner, config_args, mock_client, sample_category, category_payload):
        mock_client.get_category.return_value = sample_category

        result = runner.invoke(cli, config_args + [
            'category', 'get', '--category-id', CATEGORY_ID, '--format', 'json',
        ])

        assert result.exit_code == 0, result.output
        mock_client.get_category.assert_called_once_with(UUID(CATEGORY_ID))
        assert json.loads(result.output) == category_payload

    def test_get_rejects_bad_uuid(self, runner, config_args, mock_client):
        result = runner.invoke(cli, config_args + ['category', 'get', '--category-id', 'nope'])

        assert result.exit_code == 2
        assert 'must be a valid UUID' in result.output
        mock_client.get_category.assert_not_called()

    def test_projects(self, runner, config_args, mock_client):
        mock_client.get_project_ids_for_category.return_value = [UUID(PROJECT_ID)]

        result = runner.invoke(cli, config_args + ['category', 'projects', '-c', CATEGORY_ID])

        assert result.exit_code == 0, result.output
        assert PROJECT_ID in result.output

    def test_skills_json(self, runner, config_args, mock_client):
        mock_client.get_skill_ids_for_category.return_value = GetSkillIDsForCategoryResponse(
            skill_ids=[UUID(SKILL_ID)]
        )

        result = runner.invoke(cli, config_args + [
            'category', 'skills', '-c', CATEGORY_ID, '-f', 'json',
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [SKILL_ID]

    def test_sdk_error_reported(self, runner, config_args, mock_client):
        mock_client.get_category.side_effect = UnexpectedStatusError(404, 200)

        result = runner.invoke(cli, config_args + ['category', 'get', '-c', CATEGORY_ID])

        assert result.exit_code == 1
        assert 'Error: unexpected status code: got 404, expected 200' in result.output


class TestProjectCommands:
    """Test project association commands."""

    def test_categories_table(self, runner, config_args, mock_client, sample_category):
        mock_client.get_categories_for_project.return_value = [sample_category]

        result = runner.invoke(cli, config_args + ['project', 'categories', '-p', PROJECT_ID])

        assert result.exit_code == 0, result.output
        assert 'Total categories: 1' in result.output
        assert 'Sales' in result.output

    def test_categories_empty(self, runner, config_args, mock_client):
        mock_client.get_categories_for_project.return_value = []

        result = runner.invoke(cli, config_args + ['project', 'categories', '-p', PROJECT_ID])

        assert result.exit_code == 0
        assert 'No categories found.' in result.output

    def test_associate(self, runner, config_args, mock_client):
        result = runner.invoke(cli, config_args + [
            'project', 'associate', '--category-id', CATEGORY_ID, '--project-id', PROJECT_ID,
        ])

        assert result.exit_code == 0, result.output
        mock_client.associate_category_with_project.assert_called_once_with(
            UUID(CATEGORY_ID), UUID(PROJECT_ID)
        )

    def test_disassociate_transport_error(self, runner, config_args, mock_client):
        mock_client.disassociate_category_from_project.side_effect = TransportError("refused")

        result = runner.invoke(cli, config_args + [
            'project', 'disassociate', '-c', CATEGORY_ID, '-p', PROJECT_ID,
        ])

        assert result.exit_code == 1
        assert 'Error: refused' in result.output


class TestSkillCommands:
    """Test skill association commands."""

    def test_categories(self, runner, config_args, mock_client, sample_category):
        mock_client.get_categories_for_skill.return_value = GetCategoriesForSkillResponse(
            categories=[sample_category]
        )

        result = runner.invoke(cli, config_args + ['skill', 'categories', '-s', SKILL_ID])

        assert result.exit_code == 0, result.output
        request = mock_client.get_categories_for_skill.call_args[0][0]
        assert request.skill_id == UUID(SKILL_ID)
        assert 'Sales' in result.output

    def test_associate(self, runner, config_args, mock_client):
        result = runner.invoke(cli, config_args + [
            'skill', 'associate', '-c', CATEGORY_ID, '-s', SKILL_ID,
        ])

        assert result.exit_code == 0, result.output
        mock_client.associate_category_with_skill.assert_called_once_with(
            AssociateCategoryWithSkillRequest(category_id=UUID(CATEGORY_ID), skill_id=UUID(SKILL_ID))
        )

    def test_disassociate(self, runner, config_args, mock_client):
        result = runner.invoke(cli, config_args + [
            'skill', 'disassociate', '-c', CATEGORY_ID, '-s', SKILL_ID,
        ])

        assert result.exit_code == 0, result.output
        mock_client.disassociate_category_from_skill.assert_called_once_with(
            DisassociateCategoryFromSkillRequest(category_id=UUID(CATEGORY_ID), skill_id=UUID(SKILL_ID))
        )
