from setuptools import setup

setup(
    name='graph-tool-core',
    version='1.0.0',
    description='Traversal engine and editing surface for the Graph Learning Tool',
    package_dir={'core': '.'},
    packages=['core.services', 'core.graph_tool', 'core.graph_tool.cli'],
    install_requires=[
        'graph-tool-api',
    ],
    entry_points={
        'console_scripts': [
            'graph-tool = core.graph_tool.cli.repl:main',
        ],
    },
    python_requires='>=3.10',
)
