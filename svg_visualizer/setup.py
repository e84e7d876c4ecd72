from setuptools import setup

setup(
    name='svg-visualizer',
    version='1.0.0',
    description='SVG Visualizer Plugin for the Graph Learning Tool',
    package_dir={'svg_visualizer': '.'},
    packages=['svg_visualizer.svg_visualizer'],
    install_requires=[
        'graph-tool-api',
        'graph-tool-core',
        'lxml>=6.0.0',
    ],
    entry_points={
        'graph_tool.visualizer': [
            'svg = svg_visualizer.svg_visualizer.plugin:SvgVisualizerPlugin',
        ],
    },
    python_requires='>=3.10',
)
