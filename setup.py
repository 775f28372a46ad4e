from setuptools import find_packages, setup


setup(
    author="txbench developers",
    python_requires='>=3.10',
    description=(
        "Skewed key generators and a batched bulk loader"
        " for transactional database benchmarks"
    ),
    include_package_data=True,
    keywords='txbench',
    name='txbench',
    packages=find_packages(include=['txbench', 'txbench.*']),
    version='0.1.0',
    install_requires=[
        'numpy',
        'pandas',
        'tqdm',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['txbench=txbench.main:main'],
    },
)
