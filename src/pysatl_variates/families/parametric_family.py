"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: multiple parameterizations, analytical characteristics, a
variate generator, and factory methods for distribution instances.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_variates.families.distribution import ParametricFamilyDistribution
from pysatl_variates.types import CharacteristicName, DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from pysatl_variates.families.parametrizations import Parametrization
    from pysatl_variates.rng import RandomLike
    from pysatl_variates.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    ParametrizedFunction: TypeAlias = Callable[..., Any]


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, gamma)
    that can be parameterized in different ways. Manages parametrizations and
    characteristics, and offers both an instance form (:meth:`distribution`)
    and one-shot forms (:meth:`sample`, :meth:`pdf`, ...) that take the
    parameters on every call.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to computation functions
        ``(parameters, value, **options)``. Single functions are treated as
        defined for the base parametrization. The ``sampler`` entry takes
        ``(parameters, n, random_source)``.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        if not self.parametrization_names:
            raise ValueError(f"Family {name} declares no parametrizations.")
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        # Bare callables are implemented for the base parametrization only
        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {
            characteristic: (
                forms if isinstance(forms, dict) else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }
        self._analytical_plan = {
            pname: self._plan_for(pname) for pname in self.parametrization_names
        }

    def _plan_for(
        self, pname: ParametrizationName
    ) -> dict[GenericCharacteristicName, ParametrizationName]:
        """Map each characteristic to the parametrization whose form serves ``pname``."""
        plan: dict[GenericCharacteristicName, ParametrizationName] = {}
        for characteristic, forms in self.distr_characteristics.items():
            if pname in forms:
                plan[characteristic] = pname
            elif self.base_parametrization_name in forms:
                plan[characteristic] = self.base_parametrization_name
        return plan

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If name is already registered or not declared by the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def make_parameters(
        self, parametrization_name: str | None = None, **parameters_values: Any
    ) -> Parametrization:
        """
        Build and validate a parametrization object.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        TypeError
            If parameters are missing or unexpected.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def build_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, Callable[..., Any]]:
        """
        Bind every characteristic available for ``parameters``.

        Characteristics only implemented for the base parametrization are bound
        to the converted base parameters.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, Callable[..., Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = partial(func, params_obj)

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.
        """
        parameters = self.make_parameters(parametrization_name, **parameters_values)
        distribution_type = self._distr_type(self.to_base(parameters))
        return ParametricFamilyDistribution(self.name, distribution_type, parameters)

    def sample(
        self,
        *,
        n: int | None = None,
        rng: RandomLike = None,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Any:
        """
        Draw variates without keeping a distribution instance around.

        Equivalent to ``self.distribution(...).sample(n, rng=rng)``.
        """
        return self.distribution(parametrization_name, **parameters_values).sample(n, rng=rng)

    def calculate_characteristic(
        self,
        characteristic_name: GenericCharacteristicName,
        value: Any,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> Any:
        """Evaluate a characteristic for the given parameters at ``value``."""
        distr = self.distribution(parametrization_name, **parameters_values)
        return distr.calculate_characteristic(characteristic_name, value)

    def pdf(self, x: Any, parametrization_name: str | None = None, **parameters_values: Any) -> Any:
        """Density (or mass, for discrete families) at ``x``."""
        return self.distribution(parametrization_name, **parameters_values).pdf(x)

    def pmf(self, k: Any, parametrization_name: str | None = None, **parameters_values: Any) -> Any:
        """Probability mass at ``k``."""
        return self.calculate_characteristic(
            CharacteristicName.PMF, k, parametrization_name, **parameters_values
        )

    def cdf(self, x: Any, parametrization_name: str | None = None, **parameters_values: Any) -> Any:
        """Cumulative distribution function at ``x``."""
        return self.calculate_characteristic(
            CharacteristicName.CDF, x, parametrization_name, **parameters_values
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.
        """
        from pysatl_variates.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    def __repr__(self) -> str:
        return f"ParametricFamily(name={self.name!r}, parametrizations={self.parametrization_names})"

    __call__ = distribution
