"""Install the roomq waiting-room guard."""

from setuptools import setup, find_packages

setup(
    name='roomq',
    version='0.1.0',
    packages=find_packages(exclude=['tests', '*test*']),
    python_requires='>=3.8',
    install_requires=[
        "pyjwt>=2",
        "pydantic>=2",
        "pytz",
        "flask>=2.3",
        "python-json-logger",
    ],
    extras_require={
        'test': [
            "pytest",
        ],
    },
    zip_safe=False
)
