from setuptools import setup, find_packages
import re

# Read version from fincalc/__init__.py
with open('fincalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='fincalc',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'fincalc.sdk.taxes': ['rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
            'mcp[cli]>=1.0.0,<2',
        ],
    },
    entry_points={
        'console_scripts': [
            'fin-calc=fincalc.cli.__main__:main',
            'fin-calc-mcp=fincalc.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Income projection, tax, budget, loan and affordability calculators.',
    python_requires='>=3.10',
)
