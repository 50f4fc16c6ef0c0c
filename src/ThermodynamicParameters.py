import logging
from dataclasses import dataclass, asdict, fields, replace
import PlanetParameters as PP

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ThermodynamicParameterSet:
    """
    Thermodynamic parameters of moist air.

    Every field is a float in SI units (K, Pa, J/kg, J/kg/K, m/s^2), with
    defaults taken from PlanetParameters. Secondary quantities are derived
    on demand from the fields, so an instance built with overrides stays
    internally consistent.

        >>> ps = ThermodynamicParameterSet()
        >>> ps.lh_f0()
        333600.0
        >>> ThermodynamicParameterSet(cp_v=1850.0).cp_v
        1850.0

    Instances are frozen; unknown field names raise TypeError.
    """
    t_0                           : float = PP.T_0
    p_0                           : float = PP.MSLP
    p_ref_theta                   : float = PP.p_ref_theta
    cp_v                          : float = PP.cp_v
    cp_l                          : float = PP.cp_l
    cp_i                          : float = PP.cp_i
    lh_v0                         : float = PP.LH_v0
    lh_s0                         : float = PP.LH_s0
    press_triple                  : float = PP.press_triple
    t_triple                      : float = PP.T_triple
    t_freeze                      : float = PP.T_freeze
    t_min                         : float = PP.T_min
    t_max                         : float = PP.T_max
    t_init_min                    : float = PP.T_init_min
    entropy_reference_temperature : float = PP.entropy_reference_temperature
    entropy_dry_air               : float = PP.entropy_dry_air
    entropy_water_vapor           : float = PP.entropy_water_vapor
    kappa_d                       : float = PP.kappa_d
    gas_constant                  : float = PP.gas_constant
    molmass_dryair                : float = PP.molmass_dryair
    molmass_water                 : float = PP.molmass_water
    t_surf_ref                    : float = PP.T_surf_ref
    t_min_ref                     : float = PP.T_min_ref
    grav                          : float = PP.grav
    t_icenuc                      : float = PP.T_icenuc
    pow_icenuc                    : float = PP.pow_icenuc

    def __post_init__(self):
        changed = {}
        for f in fields(self):
            value = float(getattr(self, f.name))
            object.__setattr__(self, f.name, value)
            if value != f.default:
                changed[f.name] = value
        if changed:
            logger.debug('ThermodynamicParameterSet overrides: %s', changed)
        return

    def as_dict(self):
        return asdict(self)

    def with_overrides(self, **overrides):
        return replace(self, **overrides)

    ##### Gas constants
    def r_d(self):
        return self.gas_constant / self.molmass_dryair

    def r_v(self):
        return self.gas_constant / self.molmass_water

    def molmass_ratio(self):
        return self.molmass_dryair / self.molmass_water

    ##### Latent heats and reference internal energies
    def lh_f0(self):
        return self.lh_s0 - self.lh_v0

    def e_int_v0(self):
        return self.lh_v0 - self.r_v() * self.t_0

    def e_int_i0(self):
        # fusion only
        return self.lh_f0()

    ##### Specific heats
    def cp_d(self):
        return self.r_d() / self.kappa_d

    def cv_d(self):
        return self.cp_d() - self.r_d()

    def cv_v(self):
        return self.cp_v - self.r_v()

    def cv_l(self):
        return self.cp_l

    def cv_i(self):
        return self.cp_i

    def gas_constant_air(self, q):
        """
        Specific gas constant of moist air (J/kg/K) for the phase partition `q`.

        Total water is weighted by (molmass_ratio - 1) and the `vapor` and
        `liquid` slots of the partition by -molmass_ratio. `reserved` and
        `ice` do not enter. A partition that fills only `total` gives the
        usual moist-air value R_d (1 + (molmass_ratio - 1) q_tot); filling
        `vapor` lowers R_m as if that water were condensate.
        """
        ε = self.molmass_ratio()
        return self.r_d() * ( 1.0 + (ε - 1.0)*q.total - ε*(q.vapor + q.liquid) )
