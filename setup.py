from setuptools import setup, find_packages

setup(
    name='undigraph',
    version='1.0.0',
    description='In-memory undirected graph with depth-first, breadth-first and shortest-path traversals',
    packages=find_packages(include=['undigraph', 'undigraph.*']),
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
)
