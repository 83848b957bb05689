# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from importlib import import_module
import pytest
import biolocus


def test_version_number():
    assert hasattr(biolocus, "__version__")


@pytest.mark.parametrize(
    "module_name",
    [
        "biolocus.error",
        "biolocus.location",
        "biolocus.feature",
        "biolocus.io.general",
        "biolocus.io.gff.parse",
        "biolocus.io.gff.write",
        "biolocus.io.bed.parse",
        "biolocus.io.bed.write",
    ]
)
def test_public_names(module_name):
    """
    Test whether all public names of a module are available in the
    subpackage the module belongs to.
    """
    module = import_module(module_name)
    package = import_module(module.__name__)
    for name in module.__all__:
        assert getattr(package, name) is getattr(module, name)
