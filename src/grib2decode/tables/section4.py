table_4_0 = {
'0':'Analysis or forecast at a horizontal level or in a horizontal layer at a point in time.  (see Template 4.0)',
'1':'Individual ensemble forecast, control and perturbed, at a horizontal level or in a horizontal layer at a point in time.  (see Template 4.1)',
'2':'Derived forecasts based on all ensemble members at a horizontal level or in a horizontal layer at a point in time.  (see Template 4.2)',
'3-7':'Reserved',
'8':'Average, accumulation, extreme values or other statistically processed values at a horizontal level or in a horizontal layer in a continuous or non-continuous time interval.  (see Template 4.8)',
'9':'Probability forecasts at a horizontal level or in a horizontal layer in a continuous or non-continuous time interval.  (see Template 4.9)',
'10':'Percentile forecasts at a horizontal level or in a horizontal layer in a continuous or non-continuous time interval.  (see Template 4.10)',
'11':'Individual ensemble forecast, control and perturbed, at a horizontal level or in a horizontal layer, in a continuous or non-continuous interval.  (see Template 4.11)',
'12-31':'Reserved',
'32768-65534':'Reserved for Local Use',
'65535':'Missing',
}

table_4_1_0 = {
'0':'Temperature',
'1':'Moisture',
'2':'Momentum',
'3':'Mass',
'4':'Short-wave radiation',
'5':'Long-wave radiation',
'6':'Cloud',
'7':'Thermodynamic Stability indicies',
'8':'Kinematic Stability indicies',
'9':'Temperature Probabilities',
'10':'Moisture Probabilities',
'11':'Momentum Probabilities',
'12':'Mass Probabilities',
'13':'Aerosols',
'14':'Trace gases',
'15':'Radar',
'16':'Forecast Radar Imagery',
'17':'Electrodynamics',
'18':'Nuclear/radiology',
'19':'Physical atmospheric properties',
'20':'Atmospheric chemical Constituents',
'21-189':'Reserved',
'190':'CCITT IA5 string',
'191':'Miscellaneous',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

table_4_1_1 = {
'0':'Hydrology basic products',
'1':'Hydrology probabilities',
'2':'Inland water and sediment properties',
'3-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

table_4_3 = {
'0':'Analysis',
'1':'Initialization',
'2':'Forecast',
'3':'Bias Corrected Forecast',
'4':'Ensemble Forecast',
'5':'Probability Forecast',
'6':'Forecast Error',
'7':'Analysis Error',
'8':'Observation',
'9':'Climatological',
'10':'Probability-Weighted Forecast',
'11':'Bias-Corrected Ensemble Forecast',
'12':'Post-processed Analysis',
'13':'Post-processed Forecast',
'14':'Nowcast',
'15':'Hindcast',
'16':'Physical Retrieval',
'17':'Regression Analysis',
'18':'Difference Between Two Forecasts',
'19-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

table_4_4 = {
'0':'Minute',
'1':'Hour',
'2':'Day',
'3':'Month',
'4':'Year',
'5':'Decade (10 Years)',
'6':'Normal (30 Years)',
'7':'Century (100 Years)',
'8-9':'Reserved',
'10':'3 Hours',
'11':'6 Hours',
'12':'12 Hours',
'13':'Second',
'14-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

# Fixed surface types map to [name, units].
table_4_5 = {
'0':['Reserved','unknown'],
'1':['Ground or Water Surface','unknown'],
'2':['Cloud Base Level','unknown'],
'3':['Level of Cloud Tops','unknown'],
'4':['Level of 0o C Isotherm','unknown'],
'5':['Level of Adiabatic Condensation Lifted from the Surface','unknown'],
'6':['Maximum Wind Level','unknown'],
'7':['Tropopause','unknown'],
'8':['Nominal Top of the Atmosphere','unknown'],
'9':['Sea Bottom','unknown'],
'10':['Entire Atmosphere','unknown'],
'11':['Cumulonimbus Base (CB)','m'],
'12':['Cumulonimbus Top (CT)','m'],
'20':['Isothermal Level','K'],
'100':['Isobaric Surface','Pa'],
'101':['Mean Sea Level','unknown'],
'102':['Specific Altitude Above Mean Sea Level','m'],
'103':['Specified Height Level Above Ground','m'],
'104':['Sigma Level','unknown'],
'105':['Hybrid Level','unknown'],
'106':['Depth Below Land Surface','m'],
'107':['Isentropic (theta) Level','K'],
'108':['Level at Specified Pressure Difference from Ground to Level','Pa'],
'109':['Potential Vorticity Surface','K m2 kg-1 s-1'],
'111':['Eta Level','unknown'],
'160':['Depth Below Sea Level','m'],
'200':['Entire atmosphere (considered as a single layer)','unknown'],
'255':['Missing','unknown'],
}

table_4_6 = {
'0':'Unperturbed High-Resolution Control Forecast',
'1':'Unperturbed Low-Resolution Control Forecast',
'2':'Negatively Perturbed Forecast',
'3':'Positively Perturbed Forecast',
'4':'Multi-Model Forecast',
'5-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

table_4_10 = {
'0':'Average',
'1':'Accumulation',
'2':'Maximum',
'3':'Minimum',
'4':'Difference (value at the end of the time range minus value at the beginning)',
'5':'Root Mean Square',
'6':'Standard Deviation',
'7':'Covariance (temporal variance)',
'8':'Difference ( value at the beginning of the time range minus value at the end)',
'9':'Ratio',
'10':'Standardized Anomaly',
'11':'Summation',
'12-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

table_4_11 = {
'0':'Reserved',
'1':'Successive times processed have same forecast time, start time of forecast is incremented.',
'2':'Successive times processed have same start time of forecast, forecast time is incremented.',
'3':'Successive times processed have start time of forecast incremented and forecast time decremented so that valid time remains constant.',
'4':'Successive times processed have start time of forecast decremented and forecast time incremented so that valid time remains constant.',
'5':'Floating subinterval of time between forecast time and end of overall time interval.',
'6-191':'Reserved',
'192-254':'Reserved for Local Use',
'255':'Missing',
}

# Hours per unit of time range (Code Table 4.4).
table_scale_time_hours = {
'0': 1./60.,
'1': 1.,
'2': 24.,
'3': 24.*30.,
'4': 24.*365.,
'5': 24.*365.*10.,
'6': 24.*365.*30.,
'7': 24.*365.*100.,
'10': 3.,
'11': 6.,
'12': 12.,
'13': 1./3600.,
}

table_wgrib2_level_string = {
'1':['surface','reserved'],
'2':['cloud base','reserved'],
'3':['cloud top','reserved'],
'4':['0C isotherm','reserved'],
'5':['adiabatic condensation level','reserved'],
'6':['max wind','reserved'],
'7':['tropopause','reserved'],
'8':['top of atmosphere','reserved'],
'9':['sea bottom','reserved'],
'10':['entire atmosphere','reserved'],
'11':['cumulonimbus base','reserved'],
'12':['cumulonimbus top','reserved'],
'20':['%g K level','%g-%g K layer'],
'100':['%g mb','%g-%g mb'],
'101':['mean sea level','reserved'],
'102':['%g m above mean sea level','%g-%g m above mean sea level'],
'103':['%g m above ground','%g-%g m above ground'],
'104':['%g sigma level','%g-%g sigma layer'],
'105':['%g hybrid level','%g-%g hybrid layer'],
'106':['%g m underground','%g-%g m underground'],
'107':['%g K isentropic level','%g-%g K isentropic layer'],
'108':['%g mb above ground','%g-%g mb above ground'],
'109':['PV=%g (Km^2/kg/s) surface','reserved'],
'200':['entire atmosphere (considered as a single layer)','reserved'],
'255':['no_level','no_level'],
}
