"""Tests for the public package surface."""

import logging

import sinhasinh as sas


def test_version():
    assert sas.__version__ == "0.1.0"


def test_aliases():
    assert sas.SinhArcsinh is sas.SinhArcsinhDistribution
    assert sas.Normal is sas.NormalDistribution


def test_all_names_exist():
    for name in sas.__all__:
        assert hasattr(sas, name), name


def test_library_logger_has_null_handler():
    handlers = logging.getLogger("sinhasinh").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_error_hierarchy():
    assert issubclass(sas.DomainError, ValueError)
    assert issubclass(sas.FamilyError, ValueError)
    assert issubclass(sas.NotFittedError, RuntimeError)
