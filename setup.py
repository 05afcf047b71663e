from setuptools import setup, find_namespace_packages

setup(
    name="reflector_solver",
    version="0.1.0",
    packages=find_namespace_packages(include=["reflector_solver*"]),
    package_data={"reflector_solver": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "reflector-platform=reflector_solver.scripts.run_platform:main",
            "reflector-lens=reflector_solver.scripts.run_lens:main",
        ]
    },
)
