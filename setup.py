import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent
version_file = HERE / "version.txt"

with open(version_file, "r", encoding="utf-8") as fh:
    version = fh.readlines()[-1].strip()

with open(HERE / "README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


def read_requirements(filename: str) -> list[str]:
    with open(HERE / filename, "r", encoding="utf-8") as fh:
        return [
            line.strip()
            for line in fh
            if line.strip() and not line.startswith("#") and not line.startswith("-e") and not line.startswith("-r")
        ]


setup(
    name="route_profiler",
    version=version,
    description="Resample routing-engine polylines and build elevation profiles with a graceful fallback",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["route_profiler", "route_profiler.*"]),
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-dev.txt")},
    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
    include_package_data=True,
    zip_safe=False,
)
