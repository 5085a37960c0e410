from setuptools import setup
from setuptools import find_namespace_packages

setup(
    name='elbctl',
    version='0.1.0',
    packages=find_namespace_packages(include=['elbctl', 'elbctl.*']),
    install_requires=[
        'Click',
        'PyYAML',
        'boto3',
        'botocore',
        'pick'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'elbctl = elbctl.elbctl:push',
        ],
    },
)
