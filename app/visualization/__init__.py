from app.visualization.labyrinth_visualization import generate_labyrinth_visualization
