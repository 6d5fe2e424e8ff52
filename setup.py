from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'orderfees',
    version = '0.1.0',
    description = 'Per-order trading fee models with maker/taker classification',
    packages = find_packages(include=['orderfees', 'orderfees.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest']
    }
)
