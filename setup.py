from setuptools import setup, find_packages

long_description = """
Directed graphs stored as adjacency lists, with depth-first search
discovery/finish timestamps for every vertex, including vertices in
disconnected components.
"""

setup(name="dfsgraph",
        version="0.0.1",
        description="Adjacency-list directed graphs and timestamped depth-first search",
        long_description=long_description,
        license="MIT",
        packages=find_packages(exclude=["test", "examples"]),
        python_requires=">=3.8",
        install_requires=[
            "matplotlib",
            "numpy",
            "graphviz",
            "pydot"],
        extras_require={
            "test": ["pytest"]},
        zip_safe=False)
