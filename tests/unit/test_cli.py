from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli.eks_manager import cli, parse_choice
from common.config import Config
from common.errors import DependencyMissingError
from eks_providers.errors import CommandError, StepFailedError


@pytest.fixture
def mocks():
    with patch("cli.echo.Echo.is_tty_connected", return_value=True), patch(
        "cli.eks_manager.check_dependencies"
    ) as check_dependencies_mock, patch(
        "cli.eks_manager.Config.load", return_value=Config()
    ), patch(
        "cli.eks_manager.AwsCommand"
    ) as aws_mock, patch(
        "cli.eks_manager.EksCluster"
    ) as cluster_mock:
        aws_mock.return_value.describe_regions.return_value = ["us-east-1", "eu-west-1"]
        yield check_dependencies_mock, cluster_mock


def test_command_help_arguments():
    runner = CliRunner()
    for help_arg in ("-h", "--help"):
        result = runner.invoke(cli, [help_arg])
        assert result.exit_code == 0
        assert "Create, delete or inspect an EKS cluster" in result.output
        assert "--config" in result.output


@pytest.mark.parametrize(
    "choice,expected",
    [
        ("1", "Create Cluster"),
        (" 2 ", "Delete Cluster"),
        ("3", "Check Cluster Status"),
        ("4", "Quit"),
        ("quit", "Quit"),
        ("create cluster", "Create Cluster"),
        ("0", None),
        ("5", None),
        ("", None),
        (None, None),
        ("delete", None),
    ],
)
def test_parse_choice(choice, expected):
    assert parse_choice(choice) == expected


def test_create_with_default_region(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="1\nmy-cluster-1\n\n")

    assert result.exit_code == 0, result.output
    assert "=== EKS Cluster Management Script ===" in result.output
    check_dependencies_mock.assert_called_once_with()
    params = cluster_mock.call_args[1]["params"]
    assert params.name == "my-cluster-1"
    assert params.region == "us-east-1"
    cluster_mock.return_value.create.assert_called_once_with()
    cluster_mock.return_value.destroy.assert_not_called()


def test_delete_and_status_dispatch(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="2\ndemo\neu-west-1\n")
    assert result.exit_code == 0, result.output
    assert cluster_mock.call_args[1]["params"].region == "eu-west-1"
    cluster_mock.return_value.destroy.assert_called_once_with()

    result = CliRunner().invoke(cli, [], input="Check Cluster Status\ndemo\n\n")
    assert result.exit_code == 0, result.output
    cluster_mock.return_value.status.assert_called_once_with()


def test_invalid_option_is_reported_and_menu_shown_again(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="9\n4\n")

    assert result.exit_code == 0
    assert "Invalid option. Please try again." in result.output
    assert result.output.count("1) Create Cluster") == 2
    assert "Goodbye!" in result.output
    cluster_mock.assert_not_called()


def test_invalid_cluster_name_does_not_start_a_workflow(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="1\nMy_Cluster\n\n4\n")

    assert result.exit_code == 0
    assert "Cluster name must contain only lowercase letters" in result.output
    assert "Goodbye!" in result.output
    cluster_mock.assert_not_called()


def test_invalid_region_lists_available_regions(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="3\ndemo\nus-east-9\n4\n")

    assert result.exit_code == 0
    assert "Invalid AWS region: us-east-9" in result.output
    assert "Available regions: us-east-1 eu-west-1" in result.output
    cluster_mock.assert_not_called()


def test_failed_step_sets_exit_code(mocks):
    check_dependencies_mock, cluster_mock = mocks
    cluster_mock.return_value.create.side_effect = StepFailedError(
        step=2,
        description="Enabling OIDC provider for IAM roles",
        reason=CommandError(tool="eksctl", command=["eksctl"], exit_code=1),
    )
    result = CliRunner().invoke(cli, [], input="1\ndemo\n\n")

    assert result.exit_code == 1
    assert "Step 2 failed (Enabling OIDC provider for IAM roles)" in result.output


def test_missing_dependency_exits_before_the_menu(mocks):
    check_dependencies_mock, cluster_mock = mocks
    check_dependencies_mock.side_effect = DependencyMissingError(dependency="eksctl")
    result = CliRunner().invoke(cli, [], input="1\n")

    assert result.exit_code == 1
    assert "eksctl is not installed or not in PATH" in result.output
    assert "Select an action" not in result.output


@patch("cli.eks_manager.check_dependencies")
@patch("cli.echo.Echo.is_tty_connected", return_value=False)
def test_missing_config_file_is_reported(tty_mock, check_dependencies_mock):
    result = CliRunner().invoke(cli, ["--config", "missing.toml"])
    assert result.exit_code == 2
    assert "missing.toml" in result.output


@patch("cli.eks_manager.Config.load", return_value=Config())
@patch("cli.eks_manager.check_dependencies")
@patch("cli.echo.Echo.is_tty_connected", return_value=False)
def test_refuses_to_run_without_a_terminal(tty_mock, check_dependencies_mock, load_mock):
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "needs a terminal" in result.output


@patch("cli.eks_manager.check_dependencies")
def test_unexpected_error(check_dependencies_mock):
    check_dependencies_mock.side_effect = KeyError("boom")
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 254
    assert "An unexpected error occurred." in result.output


def test_end_of_input_aborts_cleanly(mocks):
    check_dependencies_mock, cluster_mock = mocks
    result = CliRunner().invoke(cli, [], input="")

    assert result.exit_code == 1
    assert "Aborted!" in result.output
    assert "An unexpected error occurred." not in result.output
    cluster_mock.assert_not_called()
