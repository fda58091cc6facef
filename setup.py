from setuptools import setup, find_packages

setup(
    name='pathviz',
    version='1.0.0',
    description='Interactive shortest-path playground with step-by-step replay',
    packages=find_packages(include=['pathviz_api', 'pathviz_api.*', 'pathviz_core', 'pathviz_core.*']),
    extras_require={
        'test': [
            'pytest>=7.0',
            'hypothesis>=6.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'pathviz = pathviz_core.playground.cli.shell:main',
        ],
    },
    python_requires='>=3.8',
)
