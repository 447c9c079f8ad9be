AppName = 'MapStyle'
AppVersion = '0.1.0'
AppDescription = 'Scale dependent style sheet resolution for Traveller star maps'
AppLogFile = 'mapstyle.log'
