from setuptools import find_packages, setup

package_name = 'path_spline'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    install_requires=['numpy'],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    zip_safe=True,
    maintainer='shareef',
    maintainer_email='shareef@todo.todo',
    description='Catmull-Rom (uniform, centripetal, chordal) smoothing of 2D waypoint paths',
)
