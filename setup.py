from setuptools import setup, find_packages


setup(
    name="megutil",
    version="0.1",
    packages=find_packages(include=["megutil", "megutil.*"]),
    description="List and extract Petroglyph .meg archives.",
    author="megutil contributors",
    python_requires=">=3.8",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "megutil=megutil.cli:main",
        ]
    },
)
