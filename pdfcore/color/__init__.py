"""PDF color spaces, color values and their conversion to RGB."""