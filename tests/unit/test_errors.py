import pytest

from common.errors import DependencyMissingError, InvalidClusterNameError
from eks_providers.errors import AccountIdentityError, CommandError, StepFailedError


def test_command_error_with_exit_code():
    error = CommandError(
        tool="eksctl",
        command=["eksctl", "delete", "cluster"],
        action="delete the cluster",
        exit_code=1,
    )
    assert str(error) == (
        "An error occurred when trying to delete the cluster with 'eksctl': "
        "returned exit code 1."
    )
    assert error.get_exit_code() == 2


def test_command_error_defaults_action_to_the_command():
    error = CommandError(
        tool="kubectl",
        command=["kubectl", "apply", "-f", "my file.yaml"],
        exit_code=1,
        error_message="the server could not find the requested resource",
    )
    assert "run \"kubectl apply -f 'my file.yaml'\"" in str(error)
    assert str(error).endswith("the server could not find the requested resource")


def test_command_error_needs_a_reason():
    with pytest.raises(RuntimeError):
        CommandError(tool="aws", command=["aws"])


def test_step_failed_error_names_the_step():
    cause = CommandError(
        tool="eksctl", command=["eksctl"], action="enable the OIDC provider", exit_code=1
    )
    error = StepFailedError(
        step=2, description="Enabling OIDC provider for IAM roles", reason=cause
    )
    assert str(error).startswith("Error: Step 2 failed (Enabling OIDC provider for IAM roles)")
    assert "enable the OIDC provider" in str(error)
    assert error.get_exit_code() == 1


def test_account_identity_error_includes_cli_output():
    assert str(AccountIdentityError()) == (
        "Could not determine AWS Account ID. Check AWS credentials/profile."
    )
    error = AccountIdentityError(error_message="Unable to locate credentials\n")
    assert str(error).endswith("\nUnable to locate credentials")


def test_exit_codes():
    assert DependencyMissingError(dependency="aws").get_exit_code() == 1
    assert InvalidClusterNameError(name="X", max_length=30).get_exit_code() == 2
    assert str(DependencyMissingError(dependency="aws")) == (
        "Error: aws is not installed or not in PATH"
    )
