table_4_2_0_0 = {
'0':['Temperature','K','TMP'],
'1':['Virtual Temperature','K','VTMP'],
'2':['Potential Temperature','K','POT'],
'3':['Pseudo-Adiabatic Potential Temperature (or Equivalent Potential Temperature)','K','EPOT'],
'4':['Maximum Temperature','K','TMAX'],
'5':['Minimum Temperature','K','TMIN'],
'6':['Dew Point Temperature','K','DPT'],
'7':['Dew Point Depression (or Deficit)','K','DEPR'],
'8':['Lapse Rate','K m-1','LAPR'],
'9':['Temperature Anomaly','K','TMPA'],
'10':['Latent Heat Net Flux','W m-2','LHTFL'],
'11':['Sensible Heat Net Flux','W m-2','SHTFL'],
'12':['Heat Index','K','HEATX'],
'13':['Wind Chill Factor','K','WCF'],
'14':['Minimum Dew Point Depression','K','MINDPD'],
'15':['Virtual Potential Temperature','K','VPTMP'],
'16':['Snow Phase Change Heat Flux','W m-2','SNOHF'],
'17':['Skin Temperature','K','SKINT'],
'18':['Snow Temperature (top of snow)','K','SNOT'],
'19':['Turbulent Transfer Coefficient for Heat','Numeric','TTCHT'],
'20':['Turbulent Diffusion Coefficient for Heat','m2 s-1','TDCHT'],
'21':['Apparent Temperature','K','APTMP'],
'255':['Missing','-','MISSING'],
}

table_4_2_0_1 = {
'0':['Specific Humidity','kg kg-1','SPFH'],
'1':['Relative Humidity','%','RH'],
'2':['Humidity Mixing Ratio','kg kg-1','MIXR'],
'3':['Precipitable Water','kg m-2','PWAT'],
'4':['Vapour Pressure','Pa','VAPP'],
'5':['Saturation Deficit','Pa','SATD'],
'6':['Evaporation','kg m-2','EVP'],
'7':['Precipitation Rate','kg m-2 s-1','PRATE'],
'8':['Total Precipitation','kg m-2','APCP'],
'9':['Large-Scale Precipitation (non-convective)','kg m-2','NCPCP'],
'10':['Convective Precipitation','kg m-2','ACPCP'],
'11':['Snow Depth','m','SNOD'],
'12':['Snowfall Rate Water Equivalent','kg m-2 s-1','SRWEQ'],
'13':['Water Equivalent of Accumulated Snow Depth','kg m-2','WEASD'],
'14':['Convective Snow','kg m-2','SNOC'],
'15':['Large-Scale Snow','kg m-2','SNOL'],
'16':['Snow Melt','kg m-2','SNOM'],
'17':['Snow Age','day','SNOAG'],
'18':['Absolute Humidity','kg m-3','ABSH'],
'19':['Precipitation Type','See Table 4.201','PTYPE'],
'20':['Integrated Liquid Water','kg m-2','ILIQW'],
'21':['Condensate','kg kg-1','TCOND'],
'22':['Cloud Mixing Ratio','kg kg-1','CLMR'],
'23':['Ice Water Mixing Ratio','kg kg-1','ICMR'],
'24':['Rain Mixing Ratio','kg kg-1','RWMR'],
'25':['Snow Mixing Ratio','kg kg-1','SNMR'],
'26':['Horizontal Moisture Convergence','kg kg-1 s-1','MCONV'],
'27':['Maximum Relative Humidity','%','MAXRH'],
'28':['Maximum Absolute Humidity','kg m-3','MAXAH'],
'29':['Total Snowfall','m','ASNOW'],
'37':['Convective Precipitation Rate','kg m-2 s-1','CPRAT'],
'52':['Total Precipitation Rate','kg m-2 s-1','TPRATE'],
'255':['Missing','-','MISSING'],
}

table_4_2_0_2 = {
'0':['Wind Direction (from which blowing)','degree true','WDIR'],
'1':['Wind Speed','m s-1','WIND'],
'2':['U-Component of Wind','m s-1','UGRD'],
'3':['V-Component of Wind','m s-1','VGRD'],
'4':['Stream Function','m2 s-1','STRM'],
'5':['Velocity Potential','m2 s-1','VPOT'],
'6':['Montgomery Stream Function','m2 s-2','MNTSF'],
'7':['Sigma Coordinate Vertical Velocity','s-1','SGCVV'],
'8':['Vertical Velocity (Pressure)','Pa s-1','VVEL'],
'9':['Vertical Velocity (Geometric)','m s-1','DZDT'],
'10':['Absolute Vorticity','s-1','ABSV'],
'11':['Absolute Divergence','s-1','ABSD'],
'12':['Relative Vorticity','s-1','RELV'],
'13':['Relative Divergence','s-1','RELD'],
'14':['Potential Vorticity','K m2 kg-1 s-1','PVORT'],
'15':['Vertical U-Component Shear','s-1','VUCSH'],
'16':['Vertical V-Component Shear','s-1','VVCSH'],
'17':['Momentum Flux, U-Component','N m-2','UFLX'],
'18':['Momentum Flux, V-Component','N m-2','VFLX'],
'22':['Wind Speed (Gust)','m s-1','GUST'],
'255':['Missing','-','MISSING'],
}

table_4_2_0_3 = {
'0':['Pressure','Pa','PRES'],
'1':['Pressure Reduced to MSL','Pa','PRMSL'],
'2':['Pressure Tendency','Pa s-1','PTEND'],
'3':['ICAO Standard Atmosphere Reference Height','m','ICAHT'],
'4':['Geopotential','m2 s-2','GP'],
'5':['Geopotential Height','gpm','HGT'],
'6':['Geometric Height','m','DIST'],
'7':['Standard Deviation of Height','m','HSTDV'],
'8':['Pressure Anomaly','Pa','PRESA'],
'9':['Geopotential Height Anomaly','gpm','GPA'],
'10':['Density','kg m-3','DEN'],
'255':['Missing','-','MISSING'],
}

table_4_2_0_16 = {
'0':['Equivalent radar reflectivity factor for rain','m m6 m-3','REFZR'],
'1':['Equivalent radar reflectivity factor for snow','m m6 m-3','REFZI'],
'2':['Equivalent radar reflectivity factor for parameterized convection','m m6 m-3','REFZC'],
'3':['Echo Top','m','RETOP'],
'4':['Reflectivity','dB','REFD'],
'5':['Composite reflectivity','dB','REFC'],
'195':['Reflectivity','dB','REFD'],
'196':['Composite reflectivity','dB','REFC'],
'255':['Missing','-','MISSING'],
}
