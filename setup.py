from setuptools import setup, find_packages

setup(
    name="workout_tracker",
    version="1.0.0",
    packages=find_packages(include=["workout_tracker", "workout_tracker.*"]),
    package_data={"workout_tracker": ["assets/*.css"]},
    install_requires=[
        "pandas>=2.0.0",
        "numpy>=1.24.0",
        "dash>=2.16.0",
        "dash-bootstrap-components>=1.4.0",
        "dash-leaflet>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.9",
)
