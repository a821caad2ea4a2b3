from setuptools import setup, find_packages

setup(
    name="postlisp",
    version="0.1.0",
    description="Interpreter for a postfix S-expression language describing 2D vector drawings",
    packages=find_packages(include=["postlisp", "postlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "postlisp=postlisp.__main__:main",
            "postlisp-server=postlisp.repl_server:main",
        ],
    },
    zip_safe=False,
)
