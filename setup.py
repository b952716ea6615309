from setuptools import setup

setup(
    name='kizhi-debugger',
    version='0.1.0',
    description='Kizhi statement language interpreter and stepping debugger',
    author='Kizhi contributors',
    package_dir={'': 'src'},
    packages=['kizhi', 'kizhi.cli', 'kizhi.debugger'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'kizhi = kizhi.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
