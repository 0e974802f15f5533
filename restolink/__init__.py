"""Record linkage between the Maitres Restaurateurs and Michelin directories."""
