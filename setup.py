from setuptools import setup, find_packages

setup(
    name="lunarphase",
    version="0.1.0",
    description="Calculate the phase of the moon using Julian dates",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=['log_config', 'demo_lunarphase'],
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "freezegun>=1.2.2",
        ],
    },
)
