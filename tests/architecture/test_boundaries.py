from pytest_archon import archrule


def test_validators_independence() -> None:
    """
    Built-in validators only depend on the registry contract.
    They must not reach into the verification pipeline.
    """
    (
        archrule("validators_are_independent")
        .match("fieldrules.validators*")
        .should_not_import("fieldrules.verifier*")
        .should_not_import("fieldrules.injection*")
        .should_not_import("fieldrules.formatting*")
        .should_not_import("fieldrules.skip*")
        .check("fieldrules", skip_type_checking=True)
    )


def test_foundation_layering() -> None:
    """
    Value types, errors and lookups are the foundation of the package
    and must not depend on the modules that orchestrate them.
    """
    (
        archrule("foundation_layering")
        .match("fieldrules.context")
        .match("fieldrules.result")
        .match("fieldrules.exceptions")
        .match("fieldrules.registry")
        .match("fieldrules.resolver")
        .match("fieldrules.messages")
        .match("fieldrules.config")
        .should_not_import("fieldrules.verifier*")
        .should_not_import("fieldrules.injection*")
        .should_not_import("fieldrules.formatting*")
        .should_not_import("fieldrules.skip*")
        .check("fieldrules", skip_type_checking=True)
    )


def test_metadata_isolation() -> None:
    """
    Metadata collection describes rules; it never executes them.
    """
    (
        archrule("metadata_isolation")
        .match("fieldrules.metadata")
        .match("fieldrules.rules")
        .should_not_import("fieldrules.verifier*")
        .should_not_import("fieldrules.injection*")
        .should_not_import("fieldrules.registry*")
        .should_not_import("fieldrules.validators*")
        .check("fieldrules", skip_type_checking=True)
    )


def test_verifier_is_entry_point() -> None:
    """
    The verifier sits on top of the pipeline; only the package root re-exports it.
    """
    (
        archrule("verifier_is_entry_point")
        .match("fieldrules.*")
        .exclude("fieldrules.verifier")
        .should_not_import("fieldrules.verifier")
        .check("fieldrules", skip_type_checking=True)
    )
