from setuptools import setup, find_packages


setup(
    name='disjoint',
    version='2.0.0',
    description='Disjoint-set forests with union by rank and path halving.',
    packages=find_packages(include=['disjoint', 'disjoint.*']),
    python_requires='>=3.8',
    install_requires=[
        'networkx',
        'numpy',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
