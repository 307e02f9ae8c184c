"""Two-dimensional geometry: points, lines, circles, polygons and regions."""