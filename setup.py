# setup.py
from setuptools import setup, find_packages

setup(
    name="schemer",
    version="0.1.0",
    description="Reader and evaluator for a small Scheme-like expression language",
    packages=find_packages(include=["schemer", "schemer.*", "schemer_lsp", "schemer_lsp.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "schemer=schemer.__main__:main",
            "schemer-ls=schemer_lsp.server:main",
        ],
    },
    zip_safe=False,
)
