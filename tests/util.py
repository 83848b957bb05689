# This source code is part of the Biolocus package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from os.path import join, dirname, realpath


def data_dir(subdir):
    return join(dirname(realpath(__file__)), subdir, "data")


def read_lines(path):
    """
    Read the lines of a test file, as an embedding application would
    pass them to the parsers.
    """
    with open(path, "r", encoding="utf-8") as file:
        return file.read().splitlines()
