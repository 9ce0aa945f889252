"""Golden outputs for the sample programs under examples/."""

import os

import pytest

from bfi import EOFPolicy, RunOptions, run_file, run_string


def test_hello_world(examples_dir):
    result = run_file(os.path.join(examples_dir, "hello.bf"))
    assert result.output == b"Hello World!\n"


def test_nested_loops(examples_dir):
    result = run_file(os.path.join(examples_dir, "nested.bf"))
    assert result.output == bytes([2, 2, 2, 1, 1, 1])


@pytest.mark.parametrize("policy", [EOFPolicy.UNCHANGED, EOFPolicy.ZERO])
def test_cat_echoes_input(examples_dir, policy):
    result = run_file(os.path.join(examples_dir, "cat.bf"), input_data=b"echo me\n",
                      options=RunOptions(eof_policy=policy))
    assert result.output == b"echo me\n"


def test_max_policy_reads_255_at_end_of_input():
    result = run_string(",.", options=RunOptions(eof_policy=EOFPolicy.MAX))
    assert result.output == b"\xff"
