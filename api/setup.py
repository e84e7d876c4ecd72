from setuptools import setup

setup(
    name='graph-tool-api',
    version='1.0.0',
    description='API library with models and sink contracts for the Graph Learning Tool',
    package_dir={'api': '.'},
    packages=['api.api', 'api.api.models', 'api.api.plugins'],
    python_requires='>=3.10',
)
