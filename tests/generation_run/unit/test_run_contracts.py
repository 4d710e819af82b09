"""Tests for generation run entities."""

from __future__ import annotations

from pathlib import Path

from schema_descriptor_gen.generation_run.run_contracts import GenerationOutcome, GenerationRequest


def test_generation_request_defaults_to_configured_output() -> None:
    request = GenerationRequest(config_path="descriptor-gen.yaml")

    assert request.output_path is None


def test_generation_outcome_contains_resolved_output_path_and_count() -> None:
    outcome = GenerationOutcome(output_path=Path("/tmp/types.cpp"), schema_count=3, changed=True)

    assert outcome.output_path.name == "types.cpp"
    assert outcome.schema_count == 3
    assert outcome.changed is True
