"""Line alignment and ghost overlay comparison."""
