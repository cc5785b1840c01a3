table_originating_centers = {
'0':'WMO Secretariat',
'7':'US National Weather Service - NCEP (WMC)',
'8':'US National Weather Service - NWSTG (WMC)',
'9':'US National Weather Service - Other (WMC)',
'34':'Japanese Meteorological Agency - Tokyo (RSMC)',
'46':'Brazilian Space Agency - INPE',
'54':'Canadian Meteorological Service - Montreal (RSMC)',
'57':'U.S. Air Force - Air Force Global Weather Central',
'58':'US Navy - Fleet Numerical Oceanography Center',
'59':'NOAA Forecast Systems Lab, Boulder, CO',
'60':'National Center for Atmospheric Research (NCAR), Boulder, CO',
'74':'UK Meteorological Office - Exeter (RSMC)',
'78':'Offenbach (RSMC)',
'84':'Toulouse (RSMC)',
'85':'French Weather Service - Toulouse',
'97':'European Space Agency (ESA)',
'98':'European Centre for Medium-Range Weather Forecasts - Reading',
'161':'US NOAA Office of Oceanic and Atmospheric Research',
'173':'US National Aeronautics and Space Administration (NASA)',
'255':'Missing Value',
}
