"""Setup script for SmartCity package."""

from setuptools import find_packages, setup

setup(
    name='smartcity',
    version='0.1.0',
    author='SmartCity Team',
    author_email='example@example.com',
    description='Seeded procedural generation of city layouts: roads, zones, buildings and sensors',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/example/smartcity',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'smartcity.config': ['*.yaml'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'opensimplex>=0.4',
        'pyyaml',
    ],
    extras_require={
        'dev': [
            'pytest',
            'flake8',
            'black',
        ],
    },
)
