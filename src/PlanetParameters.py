# Physical constants
gas_constant      = 8.3144598                    #"Universal gas constant (J/mol/K)"
standard_pressure = 101325.0                     #"Standard pressure (Pa)"
standard_temperature = 273.15                    #"Standard temperature (K)"
MSLP              = standard_pressure            #"Mean sea level pressure (Pa)"
p_ref_theta       = 1.0e5                        #"Reference pressure for potential temperature (Pa)"

# Properties of dry air
molmass_dryair    = 0.028964                     #"Molecular weight dry air (kg/mol)"
R_d               = gas_constant/molmass_dryair  #"Gas constant dry air (J/kg/K)"
kappa_d           = 2/7                          #"Adiabatic exponent dry air"
cp_d              = R_d/kappa_d                  #"Isobaric specific heat dry air (J/kg/K)"
cv_d              = cp_d - R_d                   #"Isochoric specific heat dry air (J/kg/K)"

# Properties of water
molmass_water     = 0.01801528                   #"Molecular weight (kg/mol)"
molmass_ratio     = molmass_dryair/molmass_water #"Molar mass ratio dry air/water"
R_v               = gas_constant/molmass_water   #"Gas constant water vapor (J/kg/K)"
cp_v              = 1859.0                       #"Isobaric specific heat vapor (J/kg/K)"
cp_l              = 4181.0                       #"Isobaric specific heat liquid (J/kg/K)"
cp_i              = 2100.0                       #"Isobaric specific heat ice (J/kg/K)"
cv_v              = cp_v - R_v                   #"Isochoric specific heat vapor (J/kg/K)"
cv_l              = cp_l                         #"Isochoric specific heat liquid (J/kg/K)"
cv_i              = cp_i                         #"Isochoric specific heat ice (J/kg/K)"
T_freeze          = 273.15                       #"Freezing point temperature (K)"
T_triple          = 273.16                       #"Triple point temperature (K)"
press_triple      = 611.657                      #"Triple point vapor pressure (Pa)"
T_0               = standard_temperature         #"Reference temperature (K)"
LH_v0             = 2.5008e6                     #"Latent heat vaporization at T_0 (J/kg)"
LH_s0             = 2.8344e6                     #"Latent heat sublimation at T_0 (J/kg)"
LH_f0             = LH_s0 - LH_v0                #"Latent heat of fusion at T_0 (J/kg)"
e_int_vapor_tp    = LH_v0 - R_v*standard_temperature #"Specific internal energy of vapor at T_0 (J/kg)"
e_int_solid_tp    = LH_s0 - LH_v0                #"Specific internal energy of ice at T_0 (J/kg)"

# Saturation adjustment and ice nucleation
T_min             = 150.0                        #"Minimum temperature guess in saturation adjustment (K)"
T_max             = 1000.0                       #"Maximum temperature guess in saturation adjustment (K)"
T_init_min        = 90.0                         #"Minimum initial temperature in saturation adjustment (K)"
T_icenuc          = 233.00                       #"Homogeneous nucleation temperature (K)"
pow_icenuc        = 1.0                          #"Exponent of the liquid fraction ramp below freezing"

# Entropy reference state
entropy_reference_temperature = 298.15           #"Entropy reference temperature (K)"
entropy_dry_air   = 6864.8                       #"Entropy of dry air at the reference state (J/kg/K)"
entropy_water_vapor = 10513.6                    #"Entropy of water vapor at the reference state (J/kg/K)"

# Planetary parameters
grav              = 9.81                         #"Gravitational acceleration (m/s^2)"
T_surf_ref        = 290.0                        #"Reference mean surface temperature (K)"
T_min_ref         = 220.0                        #"Reference minimum temperature (K)"
