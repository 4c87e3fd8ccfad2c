from setuptools import find_namespace_packages, setup


#### GPU DEVICE INFO SETUP ####

setup(
    name="gpu_device_info",
    version="1.0.0",
    author="AMD-SHARK Authors",
    description="GPU device table and lookup helpers",
    packages=find_namespace_packages(
        include=[
            "gpu_device_info.*",
        ],
    ),
    package_dir={"": "."},
    python_requires=">=3.10",
    install_requires=[
        "dataclass-wizard",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
