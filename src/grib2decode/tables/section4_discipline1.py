table_4_2_1_0 = {
'0':['Flash Flood Guidance (Encoded as an accumulation over a floating subinterval of time between the reference time and valid time)','kg m-2','FFLDG'],
'1':['Flash Flood Runoff (Encoded as an accumulation over a floating subinterval of time)','kg m-2','FFLDRO'],
'2':['Remotely Sensed Snow Cover','See Table 4.215','RSSC'],
'3':['Elevation of Snow Covered Terrain','See Table 4.216','ESCT'],
'4':['Snow Water Equivalent Percent of Normal','%','SWEPON'],
'5':['Baseflow-Groundwater Runoff','kg m-2','BGRUN'],
'6':['Storm Surface Runoff','kg m-2','SSRUN'],
'7':['Discharge from Rivers or Streams','m3 s-1','DISRS'],
'8':['Group Water Upper Storage','kg m-2','GWUPS'],
'9':['Group Water Lower Storage','kg m-2','GWLOWS'],
'10':['Side Flow into River Channel','m3 s-1 m-1','SFLORC'],
'11':['River Storage of Water','m3','RVERSW'],
'12':['Flood Plain Storage of Water','m3','FLDPSW'],
'13':['Depth or Water on Soil Surface','kg m-2','DEPWSS'],
'14':['Upstream Accumulated Precipitation','kg m-2','UPAPCP'],
'15':['Upstream Accumulated Snow Melt','kg m-2','UPASM'],
'16':['Percolation Rate','kg m-2 s-1','PERRATE'],
'255':['Missing','-','MISSING'],
}

table_4_2_1_1 = {
'0':['Conditional percent precipitation amount fractile for an overall period (encoded as an accumulation)','kg m-2','CPPOP'],
'1':['Percent Precipitation in a sub-period of an overall period (encoded as a percent accumulation over the sub-period)','%','PPOSP'],
'2':['Probability of 0.01 inch of precipitation (POP)','%','POP'],
'255':['Missing','-','MISSING'],
}

table_4_2_1_2 = {
'0':['Water Depth','m','WDPTHIL'],
'1':['Water Temperature','K','WTMPIL'],
'2':['Water Fraction','Proportion','WFRACT'],
'3':['Sediment Thickness','m','SEDTK'],
'4':['Sediment Temperature','K','SEDTMP'],
'5':['Ice Thickness','m','ICTKIL'],
'6':['Ice Temperature','K','ICETIL'],
'7':['Ice Cover','Proportion','ICECIL'],
'8':['Land Cover (0=water, 1=land)','Proportion','LANDIL'],
'9':['Shape Factor with Respect to Salinity Profile','Numeric','SFSAL'],
'255':['Missing','-','MISSING'],
}
