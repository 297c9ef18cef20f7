from setuptools import setup

torch = ['torch>=1.0.0']
all = torch

extras_require = {
    'all': all,
    'torch': torch
}

setup(
    name='pynpyread',
    version='0.1.0',
    packages=['npyread', 'npyread._hl', 'npyread.utils'],
    license='GNU General Public License v3 (GPLv3)',
    description='Reader for NumPy .npy and .npz array files',
    python_requires='>=3.6',
    install_requires=[
        'numpy>=1.12.0'
    ],
    extras_require=extras_require
)
