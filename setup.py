from setuptools import setup

# The package is pure Python, all metadata is declared in
# 'pyproject.toml'
setup()
